from __future__ import annotations

import logging
import os


def log_level(value: str | None) -> int:
    """Resolve a level name or number, falling back to INFO when unknown."""
    if value is None:
        return logging.INFO

    if value.isdigit():
        return int(value)

    return logging.getLevelNamesMapping().get(value.upper(), logging.INFO)


logger = logging.getLogger(__package__)
if not logger.handlers:
    formatter = logging.Formatter(
        "[%(asctime)s] [%(name)s::%(threadName)s] [%(levelname)s]: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(log_level(os.getenv("TIMEOUT_QUEUE_LOG_LEVEL")))
    logger.propagate = False
