from simple_interaction.logging.log_level import LogLevel
from simple_interaction.logging.logger import Logger
from simple_interaction.logging.console_logger import ConsoleLogger
from simple_interaction.logging.callback_logger import CallbackLogger
from simple_interaction.logging.logger_registry import LoggerRegistry, get_logger

__all__ = [
    "LogLevel",
    "Logger",
    "ConsoleLogger",
    "CallbackLogger",
    "LoggerRegistry",
    "get_logger",
]
