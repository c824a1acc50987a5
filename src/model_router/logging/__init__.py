from model_router.logging.log_level import LogLevel
from model_router.logging.logger import BoundLogger, Logger
from model_router.logging.console_logger import ConsoleLogger
from model_router.logging.callback_logger import CallbackLogger
from model_router.logging.logger_registry import LoggerRegistry, get_logger

__all__ = [
    "LogLevel",
    "Logger",
    "BoundLogger",
    "ConsoleLogger",
    "CallbackLogger",
    "LoggerRegistry",
    "get_logger",
]
