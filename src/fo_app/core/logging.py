# src/fo_app/core/logging.py
from __future__ import annotations

import logging
import sys

from rich.logging import RichHandler

ROOT_LOGGER = "fo_app"


def configure_logging(
    level: int | str = logging.INFO, json: bool = False, rich: bool = False
) -> None:
    """
    Configure the root logger. Plain text or JSON lines on stdout for the API,
    a RichHandler for interactive CLI runs.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    if rich:
        handlers: list[logging.Handler] = [
            RichHandler(show_path=False, rich_tracebacks=True)
        ]
        fmt = "%(message)s"
    else:
        handlers = [logging.StreamHandler(sys.stdout)]
        fmt = (
            '{"level":"%(levelname)s","time":"%(asctime)s","name":"%(name)s",'
            '"message":"%(message)s","module":"%(module)s","line":%(lineno)d}'
            if json
            else "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
        )
    logging.basicConfig(level=level, handlers=handlers, format=fmt, force=True)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(level)


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name or ROOT_LOGGER)
