"""Interaction settings loaded from YAML."""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Union

import yaml

from simple_interaction.interaction.loop import DEFAULT_INVALID_MESSAGE
from simple_interaction.logging import ConsoleLogger, LoggerRegistry, LogLevel
from simple_interaction.models.answer_kind import AnswerKind
from simple_interaction.models.prompt_spec import DEFAULT_CHOICE_PROMPT_MARKER, PromptSpec
from simple_interaction.util.paths import get_settings_path


@dataclass(frozen=True)
class InteractionSettings:
    invalid_message: str = DEFAULT_INVALID_MESSAGE
    default_max_attempts: Optional[int] = None
    choice_prompt_marker: Optional[str] = DEFAULT_CHOICE_PROMPT_MARKER
    log_level: LogLevel = LogLevel.INFO


def load_settings(path: Union[str, Path, None] = None) -> InteractionSettings:
    """Load settings from YAML.

    With no path the default settings file is used if it exists; an explicit
    path that does not exist raises FileNotFoundError.
    """
    if path is None:
        settings_path = get_settings_path()
        if not settings_path.exists():
            return InteractionSettings()
    else:
        settings_path = Path(path)
        if not settings_path.exists():
            raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with open(settings_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a mapping: {settings_path}")

    defaults = InteractionSettings()
    max_attempts = data.get("default_max_attempts", defaults.default_max_attempts)
    if max_attempts is not None and (
        isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 1
    ):
        raise ValueError(f"default_max_attempts must be a positive integer, got {max_attempts!r}")

    invalid_message = data.get("invalid_message", defaults.invalid_message)
    if not isinstance(invalid_message, str):
        raise ValueError(f"invalid_message must be a string, got {invalid_message!r}")
    try:
        invalid_message.format(input="")
    except (KeyError, IndexError, ValueError) as exc:
        raise ValueError(
            f"invalid_message may only use the {{input}} placeholder: {invalid_message!r}"
        ) from exc

    log_level = data.get("log_level")
    return InteractionSettings(
        invalid_message=invalid_message,
        default_max_attempts=max_attempts,
        choice_prompt_marker=data.get("choice_prompt_marker", defaults.choice_prompt_marker),
        log_level=LogLevel.from_name(str(log_level)) if log_level else defaults.log_level,
    )


def apply_settings(spec: PromptSpec, settings: InteractionSettings) -> PromptSpec:
    """Return a copy of spec with unset fields filled from settings."""
    changes = {}
    if spec.max_attempts is None and settings.default_max_attempts is not None:
        changes["max_attempts"] = settings.default_max_attempts
    if spec.kind is AnswerKind.NUMBER and spec.prompt_marker is None:
        changes["prompt_marker"] = settings.choice_prompt_marker
    return replace(spec, **changes) if changes else spec


def configure_logging(settings: InteractionSettings) -> None:
    LoggerRegistry.set(ConsoleLogger(level=settings.log_level))
