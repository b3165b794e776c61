import sys
from datetime import datetime
from typing import Any, Optional, TextIO

from simple_interaction.logging.log_level import LogLevel
from simple_interaction.logging.logger import Logger


class ConsoleLogger(Logger):
    """Logger that writes to stderr, keeping stdout free for prompts."""

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
        use_colors: Optional[bool] = None,
        stream: Optional[TextIO] = None
    ):
        super().__init__(level)
        self.show_timestamp = show_timestamp
        self.show_level = show_level
        self._stream = stream
        self.use_colors = use_colors

    @property
    def stream(self) -> TextIO:
        # Resolved late so pytest's capsys and redirected stderr are honoured
        return self._stream if self._stream is not None else sys.stderr

    def _colors_enabled(self) -> bool:
        if self.use_colors is not None:
            return self.use_colors
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty and isatty())

    def _emit(self, level: LogLevel, message: str, context: dict[str, Any]) -> None:
        parts = []

        if self.show_timestamp:
            parts.append(datetime.now().strftime("[%H:%M:%S]"))

        if self.show_level:
            parts.append(f"[{level.name}]")

        parts.append(self.format(message, context))
        output = " ".join(parts)

        if self._colors_enabled():
            color = self.LEVEL_COLORS.get(level, self.RESET)
            output = f"{color}{output}{self.RESET}"

        print(output, file=self.stream)
