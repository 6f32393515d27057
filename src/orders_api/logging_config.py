"""
Process-wide logging setup.

All modules log through ``logging.getLogger(__name__)``; this module only
decides how records are formatted and where they go, once per process.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(levelname)s - [PID:%(process)d] - %(name)s - %(message)s"


def setup_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Level name for the root logger (e.g. ``"INFO"``).
        log_file: Optional file that receives the same records as stdout.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)

    # Access lines duplicate what the service already logs per order.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
