import pytest
from pydantic import ValidationError

from fkt.core.config import Settings


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("FKT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FKT_LOG_MASKED_ERRORS", raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings.load()
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.LOG_MASKED_ERRORS is False


def test_reads_environment(clean_env):
    clean_env.setenv("FKT_LOG_LEVEL", "debug")
    clean_env.setenv("FKT_LOG_MASKED_ERRORS", "true")
    settings = Settings.load()
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_MASKED_ERRORS is True


def test_rejects_unknown_level(clean_env):
    clean_env.setenv("FKT_LOG_LEVEL", "loud")
    with pytest.raises(ValidationError):
        Settings.load()


def test_rejects_invalid_flag(clean_env):
    clean_env.setenv("FKT_LOG_MASKED_ERRORS", "maybe")
    with pytest.raises(ValidationError):
        Settings.load()
