"""Where settings live on disk, in development and in PyInstaller builds."""

import os
import sys
from pathlib import Path


CONFIG_ENV_VAR = "SIMPLE_INTERACTION_CONFIG"


def get_app_root() -> Path:
    """Executable directory when frozen, otherwise the project checkout root."""
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    return Path(__file__).resolve().parents[3]


def get_settings_path() -> Path:
    """$SIMPLE_INTERACTION_CONFIG if set, else <app root>/data/config/settings.yaml."""
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return get_app_root() / "data" / "config" / "settings.yaml"
