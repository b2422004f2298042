from passprotect.core.settings import (
    BACKEND_MEMORY,
    BACKEND_REDIS,
    DEFAULTS,
    Setting,
    get_setting,
    get_timeout,
    normalize_backend,
)


def test_defaults_without_environment():
    for setting in Setting:
        assert get_setting(setting) == DEFAULTS[setting]


def test_environment_overrides_are_coerced(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("SESSION_TTL_SECONDS", "30")
    monkeypatch.setenv("DISCARD_STALE_RESPONSES", "no")
    monkeypatch.setenv("USER_AGENT", " custom-agent ")

    assert get_setting(Setting.HTTP_TIMEOUT_SECONDS) == 2.5
    assert get_setting("SESSION_TTL_SECONDS") == 30
    assert get_setting(Setting.DISCARD_STALE_RESPONSES) is False
    assert get_setting(Setting.USER_AGENT) == "custom-agent"


def test_blank_values_fall_back_to_default(monkeypatch):
    monkeypatch.setenv("USER_AGENT", "  ")
    assert get_setting(Setting.USER_AGENT) == "passprotect"


def test_zero_timeout_means_none(monkeypatch):
    assert get_timeout() == 8.0
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "0")
    assert get_timeout() is None


def test_normalize_backend():
    assert normalize_backend(None) == BACKEND_MEMORY
    assert normalize_backend(" Redis ") == BACKEND_REDIS
    assert normalize_backend("sqlite") == BACKEND_MEMORY
