from enum import IntEnum


class LogLevel(IntEnum):
    """Log levels ordered by severity (lower = more severe)."""
    ERROR = 0
    WARNING = 1
    INFO = 2
    TRACE = 3
    DEBUG = 4

    @classmethod
    def parse(cls, value) -> "LogLevel":
        """Accept a LogLevel, a level name in any case ("warn" included) or its number."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name == "WARN":
                name = "WARNING"
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"Unknown log level: {value!r}") from None
        return cls(value)
