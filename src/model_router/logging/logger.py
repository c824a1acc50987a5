from abc import ABC, abstractmethod
from typing import Any

from model_router.logging.log_level import LogLevel


class Logger(ABC):
    """Abstract base for all loggers.

    Keyword arguments to the log methods are structured fields; each
    implementation decides how to render them.
    """

    def __init__(self, level: LogLevel = LogLevel.INFO):
        self._level = LogLevel.parse(level)

    @property
    def level(self) -> LogLevel:
        return self._level

    @level.setter
    def level(self, value: LogLevel):
        self._level = LogLevel.parse(value)

    def should_log(self, level: LogLevel) -> bool:
        return level <= self._level

    @abstractmethod
    def _write(self, level: LogLevel, message: str, **kwargs: Any) -> None:
        """Write a log message. Implementations must override this."""
        pass

    def log(self, level: LogLevel, message: str, **kwargs: Any) -> None:
        if self.should_log(level):
            self._write(level, message, **kwargs)

    def bind(self, **fields: Any) -> "Logger":
        """Logger that adds ``fields`` to every record, e.g. the model of one attempt."""
        return BoundLogger(self, fields)

    def error(self, message: str, **kwargs: Any) -> None:
        self.log(LogLevel.ERROR, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.log(LogLevel.WARNING, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self.log(LogLevel.INFO, message, **kwargs)

    def trace(self, message: str, **kwargs: Any) -> None:
        self.log(LogLevel.TRACE, message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self.log(LogLevel.DEBUG, message, **kwargs)


class BoundLogger(Logger):
    """Writes through a parent logger with extra fields; the parent's level applies."""

    def __init__(self, parent: Logger, fields: dict):
        super().__init__(parent.level)
        self._parent = parent
        self._fields = dict(fields)

    def should_log(self, level: LogLevel) -> bool:
        return self._parent.should_log(level)

    def _write(self, level: LogLevel, message: str, **kwargs: Any) -> None:
        # Call-site fields win over bound ones
        self._parent._write(level, message, **{**self._fields, **kwargs})
