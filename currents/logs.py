"""File loggers shared by the build and the editor."""

from __future__ import annotations

import logging
import os

from currents.config import log_dir

_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def get_logger(name: str, filename: str = "currents.log") -> logging.Logger:
    """Named logger writing to ``log_dir()/filename``.

    The handler is attached once per target file; when CURRENTS_LOG_DIR moves,
    the old handler is closed and replaced.
    """
    logger = logging.getLogger(name)
    target = os.path.abspath(log_dir() / filename)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == target:
            return logger
        logger.removeHandler(handler)
        handler.close()

    handler = logging.FileHandler(target, encoding="utf-8")
    handler.setFormatter(logging.Formatter(_FORMAT))

    logger.setLevel(logging.INFO)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
