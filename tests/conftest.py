from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from timeout_queue.logging import logger

if TYPE_CHECKING:
    from collections.abc import Generator


def pytest_configure() -> None:
    logging.basicConfig(level=logging.ERROR)  # set log levels very high for tests
    logger.setLevel(logging.ERROR)


@pytest.fixture
def debug_log(caplog: pytest.LogCaptureFixture) -> Generator[pytest.LogCaptureFixture]:
    # the package logger does not propagate, attach the capture handler directly
    logger.addHandler(caplog.handler)
    logger.setLevel(logging.DEBUG)

    yield caplog

    logger.setLevel(logging.ERROR)
    logger.removeHandler(caplog.handler)
