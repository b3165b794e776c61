from abc import ABC, abstractmethod
from typing import Any

from simple_interaction.logging.log_level import LogLevel


class Logger(ABC):
    """Abstract base for all loggers.

    Keyword arguments passed to the level methods are context fields; they
    are appended to the message as ``key=value`` pairs by ``format``.
    """

    def __init__(self, level: LogLevel = LogLevel.INFO):
        self._level = level

    @property
    def level(self) -> LogLevel:
        return self._level

    @level.setter
    def level(self, value: LogLevel):
        self._level = value

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level <= self._level

    @staticmethod
    def format(message: str, context: dict[str, Any]) -> str:
        if not context:
            return message
        fields = " ".join(f"{key}={value!r}" for key, value in context.items())
        return f"{message} ({fields})"

    @abstractmethod
    def _emit(self, level: LogLevel, message: str, context: dict[str, Any]) -> None:
        pass

    def log(self, level: LogLevel, message: str, /, **context: Any) -> None:
        if self.is_enabled_for(level):
            self._emit(level, message, context)

    def error(self, message: str, /, **context: Any) -> None:
        self.log(LogLevel.ERROR, message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self.log(LogLevel.WARNING, message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self.log(LogLevel.INFO, message, **context)

    def trace(self, message: str, /, **context: Any) -> None:
        self.log(LogLevel.TRACE, message, **context)

    def debug(self, message: str, /, **context: Any) -> None:
        self.log(LogLevel.DEBUG, message, **context)
