"""
Logging for the journal: trade log changes, store load/save and fallbacks,
coach requests and failures. Console (stderr, so CLI reports on stdout stay
clean) plus an optional file under log_dir.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "trade_journal"


def setup_logging(
    level: str = "INFO",
    log_dir: Optional[Path] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the trade_journal logger; module loggers (trade_journal.store.*,
    trade_journal.coach.*) propagate to it. Calling again replaces the handlers.
    The Gemini key never goes into a message or a URL, so it cannot reach these handlers.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_dir and log_file:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path / log_file, encoding="utf-8")
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger
