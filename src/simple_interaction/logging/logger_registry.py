from contextlib import contextmanager
from typing import Iterator, Optional

from simple_interaction.logging.log_level import LogLevel
from simple_interaction.logging.logger import Logger
from simple_interaction.logging.console_logger import ConsoleLogger


class LoggerRegistry:
    """Process-wide holder for the logger the interaction loop writes to."""

    _active: Optional[Logger] = None

    @classmethod
    def get(cls) -> Logger:
        """Current logger; a stderr ConsoleLogger at INFO until one is set."""
        if cls._active is None:
            cls._active = ConsoleLogger(level=LogLevel.INFO)
        return cls._active

    @classmethod
    def set(cls, logger: Logger) -> None:
        cls._active = logger

    @classmethod
    def reset(cls) -> None:
        cls._active = None

    @classmethod
    @contextmanager
    def using(cls, logger: Logger) -> Iterator[Logger]:
        """Install logger for the duration of a with-block."""
        previous = cls._active
        cls._active = logger
        try:
            yield logger
        finally:
            cls._active = previous


def get_logger() -> Logger:
    return LoggerRegistry.get()
