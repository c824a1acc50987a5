import os
from typing import Optional

from model_router.logging.log_level import LogLevel
from model_router.logging.logger import Logger
from model_router.logging.console_logger import ConsoleLogger

LOG_LEVEL_ENV = "MODEL_ROUTER_LOG_LEVEL"


class LoggerRegistry:
    """Global registry for the active logger instance.

    Library code only ever calls ``get_logger()``; applications install their
    own logger with ``LoggerRegistry.set``.
    """

    _instance: Optional[Logger] = None

    @classmethod
    def get(cls) -> Logger:
        """Get the current logger, creating a default ConsoleLogger if none set.

        The default level is INFO unless MODEL_ROUTER_LOG_LEVEL names another.
        """
        if cls._instance is None:
            level = LogLevel.parse(os.environ.get(LOG_LEVEL_ENV) or LogLevel.INFO)
            cls._instance = ConsoleLogger(level=level)
        return cls._instance

    @classmethod
    def set(cls, logger: Logger) -> None:
        cls._instance = logger

    @classmethod
    def reset(cls) -> None:
        """Reset to no logger (next get() will create default)."""
        cls._instance = None


def get_logger() -> Logger:
    return LoggerRegistry.get()
