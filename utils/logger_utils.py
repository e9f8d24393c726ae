"""Logging setup for the FlowTrans namespace.

Flow Launcher parses the plugin's stdout as JSON-RPC, so log records only ever go to stderr and to
a rotating file next to the entry script.
"""

from __future__ import annotations

import logging
import sys
import warnings
from logging import Formatter, Handler, NullHandler, StreamHandler
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, ClassVar, Final, Literal, Self, TextIO, TypeAlias

if TYPE_CHECKING:
    from pathlib import Path

__all__: list[str] = ["LoggerUtils"]

LevelType: TypeAlias = Literal["NOTSET", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LOG_FILE_SIZE: Final[int] = 2 * 1024 * 1024  # 2MB
_LOG_BACKUP_COUNT: Final[int] = 2
_FILE_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s %(process)5d %(name)-36s %(funcName)s:%(lineno)d\t%(message)s"

DEFAULT_LOG_LEVEL: Final[int] = logging.INFO
DEFAULT_NAMESPACE: Final[str] = "FlowTrans"


class LoggerUtils:
    """Singleton owning the handlers of the FlowTrans logger namespace.

    Modules never configure logging themselves; they call get_logger(__name__) at import time and
    the handlers attached here apply once main.py has constructed the singleton.
    """

    _LOGGER_NAMESPACE: ClassVar[str] = DEFAULT_NAMESPACE
    _configured: ClassVar[bool] = False
    _instance: ClassVar[Self | None] = None

    def __new__(cls, *args, **kwargs) -> Self:
        _ = args, kwargs
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, filename: str | Path, *, use_null_console: bool = False) -> None:
        """Attach the console and file handlers once per process.

        Args:
            filename (str | Path): Absolute path of the log file. An empty value disables file logging.
            use_null_console (bool): Discard console output instead of writing it to stderr.
        """
        if LoggerUtils._configured:
            return

        self.namespace_logger: logging.Logger = self.get_logger()
        self.namespace_logger.setLevel(DEFAULT_LOG_LEVEL)

        handlers: list[Handler | None] = [
            self._console_handler(null=use_null_console or sys.stderr is None),
            self._file_handler(str(filename)),
        ]
        for handler in handlers:
            if handler is not None:
                self.namespace_logger.addHandler(handler)

        warnings.showwarning = self._log_warning
        LoggerUtils._configured = True

    def _console_handler(self, *, null: bool) -> Handler:
        if null:
            return NullHandler()
        handler: StreamHandler[TextIO] = StreamHandler(sys.stderr)
        # the host shows stderr to the user, keep it to problems only
        handler.setLevel(logging.WARNING)
        handler.setFormatter(Formatter("FlowTrans: %(message)s"))
        return handler

    def _file_handler(self, filename: str) -> Handler | None:
        if not filename.strip():
            self.namespace_logger.warning("No log file given, file logging disabled")
            return None
        try:
            handler = RotatingFileHandler(
                filename=filename,
                maxBytes=_LOG_FILE_SIZE,
                backupCount=_LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        except OSError as err:
            self.namespace_logger.error("Cannot open log file '%s': %s", filename, err)
            return None
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(Formatter(_FILE_FORMAT))
        return handler

    def _log_warning(
        self,
        message: Warning | str,
        category: type[Warning],
        filename: str,
        lineno: int,
        file: TextIO | None = None,
        line: str | None = None,
    ) -> None:
        """Replacement for warnings.showwarning that writes to the log instead of stderr."""
        _ = file, line
        self.namespace_logger.warning("%s:%d: %s: %s", filename, lineno, category.__name__, message)

    @classmethod
    def set_level(cls, level: LevelType) -> None:
        """Set the namespace level by name; unknown names fall back to INFO."""
        namespace_logger: logging.Logger = cls.get_logger()
        numeric: int | None = logging.getLevelNamesMapping().get(str(level).upper())
        if numeric is None:
            namespace_logger.warning("Unknown logging level '%s', using INFO", level)
            numeric = DEFAULT_LOG_LEVEL
        namespace_logger.setLevel(numeric)

    @classmethod
    def enable_debug(cls, enabled: bool) -> None:  # noqa: FBT001
        """Apply the 'debug' setting of the current request."""
        cls.set_level("DEBUG" if enabled else "INFO")

    @staticmethod
    def get_logger(name: str | None = None) -> logging.Logger:
        """Get a logger below the FlowTrans namespace.

        Args:
            name (str | None): Usually ``__name__``. None returns the namespace logger itself.

        Returns:
            logging.Logger: The logger instance.
        """
        namespace: str = LoggerUtils._LOGGER_NAMESPACE
        if not name:
            return logging.getLogger(namespace)
        return logging.getLogger(f"{namespace}.{name}")
