import sys
from datetime import datetime
from typing import Any

from model_router.logging.log_level import LogLevel
from model_router.logging.logger import Logger


class ConsoleLogger(Logger):
    """Logger that writes to stderr with optional timestamps and level prefixes.

    Keyword arguments passed to the log methods are appended as ``key=value``
    pairs, so router output stays greppable (``model=deepseek-chat provider=deepseek``).
    """

    LEVEL_COLORS = {
        LogLevel.ERROR: "\033[91m",    # Red
        LogLevel.WARNING: "\033[93m",  # Yellow
        LogLevel.INFO: "\033[0m",      # Default
        LogLevel.TRACE: "\033[96m",    # Cyan
        LogLevel.DEBUG: "\033[90m",    # Gray
    }
    RESET = "\033[0m"

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        show_timestamp: bool = False,
        show_level: bool = True,
        use_colors: bool = True,
        stream=None
    ):
        super().__init__(level)
        self.show_timestamp = show_timestamp
        self.show_level = show_level
        self.use_colors = use_colors
        self.stream = stream

    def _write(self, level: LogLevel, message: str, **kwargs: Any) -> None:
        parts = []

        if self.show_timestamp:
            parts.append(datetime.now().strftime("[%H:%M:%S]"))

        if self.show_level:
            parts.append(f"[{level.name}]")

        parts.append(message)
        parts.extend(f"{key}={value}" for key, value in kwargs.items())
        output = " ".join(parts)

        if self.use_colors:
            color = self.LEVEL_COLORS.get(level, self.RESET)
            output = f"{color}{output}{self.RESET}"

        print(output, file=self.stream or sys.stderr)
