import pytest

from yield_agent.config import DEFAULT_ALLOWED_ORIGINS, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Ensure cached settings do not leak between tests."""

    get_settings.cache_clear()


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("YIELD_AGENT_ALLOWED_ORIGINS", raising=False)
    monkeypatch.delenv("YIELD_AGENT_LOG_LEVEL", raising=False)

    settings = get_settings()

    assert settings.allowed_origins == DEFAULT_ALLOWED_ORIGINS
    assert settings.log_level == "INFO"


def test_allowed_origins_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("YIELD_AGENT_ALLOWED_ORIGINS", "https://app.example.com, ,https://admin.example.com")

    settings = get_settings()

    assert settings.allowed_origins == ["https://app.example.com", "https://admin.example.com"]


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("YIELD_AGENT_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.log_level == "DEBUG"
    assert settings.log_level_number == 10


def test_unknown_log_level_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("YIELD_AGENT_LOG_LEVEL", "chatty")

    assert get_settings().log_level == "INFO"
