"""Logging configuration.

The analysis package only emits records once an application opts in, and the
sinks added here carry nothing but those records, so host sinks are left alone.
"""

import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL

PACKAGE = "app"


def from_package(record: dict) -> bool:
    """Whether a record was logged by the analysis package."""
    name = record["name"] or ""
    return name == PACKAGE or name.startswith(f"{PACKAGE}.")


def setup_logging(level: str = LOG_LEVEL, to_file: bool = False) -> tuple[int, ...]:
    """Enable package logs on stderr and optionally in LOG_DIR. Returns the sink ids."""
    logger.enable(PACKAGE)

    sinks = [
        logger.add(
            sys.stderr,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{name}</cyan> | {message}",
            level=level,
            filter=from_package,
        )
    ]

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        sinks.append(
            logger.add(
                LOG_DIR / "analysis.log",
                format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function} | {message}",
                level="DEBUG",
                filter=from_package,
                rotation="10 MB",
                retention=3,
            )
        )

    return tuple(sinks)


def teardown_logging(sinks: tuple[int, ...]) -> None:
    """Remove the sinks from setup_logging and silence the package again."""
    for sink in sinks:
        logger.remove(sink)
    logger.disable(PACKAGE)
