from enum import IntEnum


class LogLevel(IntEnum):
    """Log levels ordered by severity (lower = more severe)."""
    ERROR = 0
    WARNING = 1
    INFO = 2
    TRACE = 3
    DEBUG = 4

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {name}") from None
