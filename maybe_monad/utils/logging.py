"""
Functions for logging
"""

import logging
import sys
import warnings
from functools import wraps
from pathlib import Path
from typing import TextIO

from loguru import logger

from ..config import auto_match_config
from ..constants import PACKAGE_NAME

__all__ = ["config_logger", "logger_wraps"]


class _RedirectHandler(logging.Handler):
    """
    Forward records of the standard `logging` module to loguru
    """

    def emit(self, record: logging.LogRecord) -> None:
        level: str | int
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip the frames of the logging module so loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _redirect_standard_logging() -> None:
    logging.basicConfig(handlers=[_RedirectHandler()], level=0, force=True)
    warnings.showwarning = lambda message, *_, **__: logger.warning(str(message))


@auto_match_config(prefixes=["logger"])
def config_logger(
    sink: str | Path | TextIO = sys.stderr,
    format: str = "{time:YYYY-MM-DD at HH:mm:ss} {level} {message}",
    level: str = "INFO",
    backtrace: bool = True,
    diagnose: bool = True,
    retention: str | None = None,
    enable: bool = True,
):
    """
    Replace loguru's handlers with a single configured sink

    The package's own records are disabled on import; `enable` switches
    them back on. `retention` is only passed on for file sinks. Records of
    the standard `logging` module and warnings end up in the same sink.
    """
    file_options = {"retention": retention} if isinstance(sink, (str, Path)) else {}

    logger.remove()
    logger.add(
        sink,  # type: ignore
        format=format,
        level=level,
        backtrace=backtrace,
        diagnose=diagnose,
        **file_options,
    )
    if enable:
        logger.enable(PACKAGE_NAME)
    _redirect_standard_logging()


def logger_wraps(*, entry=True, exit=True, level="DEBUG"):
    """
    Log the arguments a function is called with and the result it returns

    Messages are formatted by loguru, only when a sink accepts the record.
    """

    def wrapper(func):
        name = getattr(func, "__name__", repr(func))

        @wraps(func)
        def wrapped(*args, **kwargs):
            if entry:
                logger.log(
                    level, "Entering '{}' (args={!r}, kwargs={!r})", name, args, kwargs
                )
            result = func(*args, **kwargs)
            if exit:
                logger.log(level, "Exiting '{}' (result={!r})", name, result)
            return result

        return wrapped

    return wrapper
