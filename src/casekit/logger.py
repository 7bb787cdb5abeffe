from __future__ import annotations

import logging
import os
import sys
from typing import NoReturn, Optional, Union

from dotenv import load_dotenv

load_dotenv()

try:
    import colorlog  # type: ignore
except ImportError:  # pragma: no cover - optional dependency
    colorlog = None

TRACE = 5


class AppLogger(logging.Logger):
    def error_raise(
        self,
        message: str,
        *,
        exc: Optional[Union[BaseException, type[BaseException]]] = None,
    ) -> NoReturn:
        """
        Log ``message`` at error level, then raise.
        ``exc`` may be an exception class (built with ``message``) or an instance;
        without it a RuntimeError is raised.
        """
        self.error(message)
        if exc is None:
            raise RuntimeError(message)
        if isinstance(exc, type):
            raise exc(message)
        raise exc

    def trace(self, message: str, *args, **kwargs) -> None:
        if self.isEnabledFor(TRACE):
            self._log(TRACE, message, args, **kwargs)


class ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover - trivial
        record.classname = record.module
        record.funcname = record.funcName
        return True


_LEVELS = {
    "TRACE": TRACE,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def determine_level(raw: str | None = None) -> int:
    if raw is None:
        raw = os.getenv("LOG_LEVEL")
    return _LEVELS.get((raw or "").strip().upper(), logging.INFO)


def _build_formatter() -> logging.Formatter:
    base_format = "[%(levelname)s] %(asctime)s - %(classname)s:%(lineno)d %(funcname)s(): %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    if colorlog is not None:
        return colorlog.ColoredFormatter(
            fmt="%(log_color)s" + base_format,
            datefmt=date_format,
            log_colors={
                "TRACE": "white",
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
    return logging.Formatter(fmt=base_format, datefmt=date_format)


def setup_logger(name: str) -> AppLogger:
    if logging.getLevelName(TRACE) != "TRACE":
        logging.addLevelName(TRACE, "TRACE")
    previous_class = logging.getLoggerClass()
    logging.setLoggerClass(AppLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous_class)
    if getattr(logger, "_logger_initialized", False):  # type: ignore[attr-defined]
        return logger  # type: ignore[return-value]

    logger.setLevel(determine_level())
    logger.propagate = False

    formatter = _build_formatter()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(logging.NOTSET)
    stdout_handler.addFilter(lambda record: record.levelno < logging.ERROR)
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.ERROR)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    logger.addFilter(ContextFilter())
    logger._logger_initialized = True  # type: ignore[attr-defined]
    return logger  # type: ignore[return-value]


logger: AppLogger = setup_logger("casekit")

__all__ = ["logger", "setup_logger", "determine_level", "AppLogger", "TRACE"]
