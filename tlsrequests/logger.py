"""
Leveled log sink for services built on top of the client, plus process logging setup.

The client itself logs through module-level stdlib loggers. ``Logger`` is the
narrow ``debug/info/warn/error/panic(module, data)`` contract handed to
callers that want to record call outcomes without depending on logging
configuration details.
"""

import logging
import logging.handlers
import sys
from typing import Any, Protocol

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEV_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(pathname)s:%(lineno)d | %(message)s"

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}
RUN_MODES = ("dev", "debug", "release")

_HANDLER_MARK = "_tlsrequests_handler"


class LoggerPanic(RuntimeError):
    """Raised by StdLogger.panic after the record has been written."""


class Logger(Protocol):
    """Leveled sink; ``data`` is a free-form payload logged as-is."""

    def debug(self, module: str, data: Any) -> None: ...

    def info(self, module: str, data: Any) -> None: ...

    def warn(self, module: str, data: Any) -> None: ...

    def error(self, module: str, data: Any) -> None: ...

    def panic(self, module: str, data: Any) -> None: ...


class StdLogger:
    """Logger backed by a stdlib logger."""

    def __init__(self, name: str = "tlsrequests") -> None:
        self._logger = logging.getLogger(name)

    def _log(self, level: int, module: str, data: Any) -> None:
        self._logger.log(level, "%s", data, extra={"module_name": module})

    def debug(self, module: str, data: Any) -> None:
        self._log(logging.DEBUG, module, data)

    def info(self, module: str, data: Any) -> None:
        self._log(logging.INFO, module, data)

    def warn(self, module: str, data: Any) -> None:
        self._log(logging.WARNING, module, data)

    def error(self, module: str, data: Any) -> None:
        self._log(logging.ERROR, module, data)

    def panic(self, module: str, data: Any) -> None:
        self._log(logging.CRITICAL, module, data)
        raise LoggerPanic(f"[{module}] {data}")


class NopLogger:
    """Logger that prints every payload to stdout, whatever the level."""

    def debug(self, module: str, data: Any) -> None:
        print(data)

    def info(self, module: str, data: Any) -> None:
        print(data)

    def warn(self, module: str, data: Any) -> None:
        print(data)

    def error(self, module: str, data: Any) -> None:
        print(data)

    def panic(self, module: str, data: Any) -> None:
        print(data)


def configure_logging(
    level: str = "info",
    *,
    run_mode: str = "release",
    log_file: str | None = None,
    max_bytes: int = 10 * 1024 * 1024,
    backups: int = 5,
) -> logging.Logger:
    """
    Install a stdout handler, and a rotating file handler when ``log_file`` is set.

    The level always comes from ``level``. The ``dev`` run mode switches to a
    development format that adds the caller location. Calling this again
    replaces the handlers installed by a previous call.
    """
    level_name = level.strip().lower()
    if level_name not in LEVELS:
        raise ValueError(f"Unrecognized log level {level!r}; expected one of {sorted(LEVELS)}.")
    if run_mode not in RUN_MODES:
        raise ValueError(f"Unrecognized running mode {run_mode!r}; expected one of {list(RUN_MODES)}.")

    formatter = logging.Formatter(DEV_LOG_FORMAT if run_mode == "dev" else LOG_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backups,
                encoding="utf-8",
            )
        )

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARK, True)
        root.addHandler(handler)
    root.setLevel(LEVELS[level_name])
    return root
