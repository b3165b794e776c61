from typing import Any, Callable, Optional

from simple_interaction.logging.log_level import LogLevel
from simple_interaction.logging.logger import Logger


class CallbackLogger(Logger):
    """Logger that hands every record to a callback (host apps, tests)."""

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        callback: Optional[Callable[[LogLevel, str], None]] = None
    ):
        super().__init__(level)
        self._callback = callback

    def set_callback(self, callback: Callable[[LogLevel, str], None]) -> None:
        """Set or update the callback."""
        self._callback = callback

    def _emit(self, level: LogLevel, message: str, context: dict[str, Any]) -> None:
        if self._callback:
            self._callback(level, self.format(message, context))
