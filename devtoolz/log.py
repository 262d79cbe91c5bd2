"""Logging configuration using loguru."""

import sys

from loguru import logger


def _stderr_sink(message) -> None:
    # Looked up on every write so redirected streams (e.g. CliRunner) are honoured.
    sys.stderr.write(message)


def setup_logging(level: str = "WARNING") -> None:
    """Configure loguru with a single stderr sink.

    Call this once per run, before the pipeline starts.
    """
    level = level.upper()

    logger.remove()
    logger.add(
        _stderr_sink,
        level=level,
        format=(
            "<green>{time:HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=False,
    )

    logger.debug("Logging initialised (level={})", level)
