from __future__ import annotations

import logging
import sys
from pathlib import Path

from tokendiff.config import Settings

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s:%(lineno)d  →  %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def file_handler(settings: Settings) -> logging.Handler | None:
    if not settings.log_file:
        return None

    log_path = Path(settings.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    handler.setLevel(settings.log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(settings: Settings | None = None) -> None:
    """
    Point the root logger at the level and log file from `settings`.

    Handlers already attached (pytest's capture handlers, or a file handler
    from an earlier command) are kept; a stderr console handler is only
    installed when the root logger has none.
    """
    settings = settings or Settings()

    root = logging.getLogger()
    root.setLevel(settings.log_level)

    if settings.log_file:
        log_path = str(Path(settings.log_file).resolve())
        attached = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == log_path
            for h in root.handlers
        )
        if not attached:
            handler = file_handler(settings)
            assert handler is not None
            root.addHandler(handler)

    # stdout carries command output
    if not root.handlers:
        logging.basicConfig(
            level=settings.log_level,
            format=LOG_FORMAT,
            datefmt=DATE_FORMAT,
            handlers=[logging.StreamHandler(sys.stderr)],
        )
