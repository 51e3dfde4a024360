from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from timeout_queue.logging import log_level


@pytest.mark.parametrize(
    ("value", "level"),
    [
        (None, logging.INFO),
        ("DEBUG", logging.DEBUG),
        ("debug", logging.DEBUG),
        ("warning", logging.WARNING),
        ("10", 10),
        ("15", 15),
        ("verbose", logging.INFO),
        ("", logging.INFO),
    ],
)
def test_log_level(value: str | None, level: int) -> None:
    assert log_level(value) == level


@pytest.mark.parametrize(
    ("value", "level"),
    [
        ("DEBUG", logging.DEBUG),
        ("10", 10),
        ("verbose", logging.INFO),
    ],
)
def test_log_level_from_environment(value: str, level: int) -> None:
    root = str(Path(__file__).parents[1])
    pythonpath = os.pathsep.join(p for p in (root, os.environ.get("PYTHONPATH")) if p)
    env = {**os.environ, "PYTHONPATH": pythonpath, "TIMEOUT_QUEUE_LOG_LEVEL": value}
    result = subprocess.run(
        [sys.executable, "-c", "import timeout_queue; print(timeout_queue.logging.logger.level)"],
        env=env,
        capture_output=True,
        text=True,
        check=True,
    )

    assert int(result.stdout.strip()) == level
