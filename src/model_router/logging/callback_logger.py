from typing import Any, Callable, Optional

from model_router.logging.log_level import LogLevel
from model_router.logging.logger import Logger


class CallbackLogger(Logger):
    """Logger that hands every record to a callback instead of printing it."""

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        callback: Optional[Callable[[LogLevel, str, dict], None]] = None
    ):
        super().__init__(level)
        self._callback = callback

    def set_callback(self, callback: Callable[[LogLevel, str, dict], None]) -> None:
        """Set or update the callback."""
        self._callback = callback

    def _write(self, level: LogLevel, message: str, **kwargs: Any) -> None:
        if self._callback:
            self._callback(level, message, kwargs)
