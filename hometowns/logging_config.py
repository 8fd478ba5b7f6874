"""Centralized logging configuration."""

import logging
import sys


def setup_logging(level: str | None = None) -> None:
    """Configure logging for the application.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...). Defaults to INFO.
    """
    log_level = getattr(logging, level.upper(), logging.INFO) if level else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Per-request lines from the HTTP stack are noise at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger("hometowns").setLevel(log_level)
    logging.getLogger(__name__).info(
        "Logging initialized at level: %s", logging.getLevelName(log_level)
    )
