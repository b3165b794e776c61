import pytest

from simple_interaction.logging import LoggerRegistry
from simple_interaction.util.paths import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep a developer's settings.yaml and logger out of the tests."""
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "no-settings.yaml"))
    LoggerRegistry.reset()
    yield
    LoggerRegistry.reset()
