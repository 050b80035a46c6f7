import os

from config import get_settings


def test_settings_reads_env(monkeypatch):
    # clear cache so we read fresh env variables
    get_settings.cache_clear()

    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOOKUP_VALIDATION_MODE", "Legacy")
    monkeypatch.setenv("LOOKUP_NOT_FOUND_STATUS", "404")

    settings = get_settings()

    assert settings.env == "test"
    assert settings.log_level == "DEBUG"
    assert settings.validation_mode == "legacy"
    assert settings.is_legacy_validation is True
    assert settings.not_found_status == 404


def test_settings_defaults_when_env_missing(monkeypatch):
    # clear cache so we read fresh env variables
    get_settings.cache_clear()

    # ensure env vars are not set
    for var in [
        "ENV",
        "LOG_LEVEL",
        "LOOKUP_VALIDATION_MODE",
        "LOOKUP_NOT_FOUND_STATUS",
    ]:
        if var in os.environ:
            monkeypatch.delenv(var, raising=False)

    settings = get_settings()

    assert settings.env == "local"  # default
    assert settings.log_level == "INFO"
    assert settings.validation_mode == "strict"
    assert settings.is_legacy_validation is False
    assert settings.not_found_status == 500


def test_settings_fall_back_on_unknown_values(monkeypatch):
    get_settings.cache_clear()

    monkeypatch.setenv("LOOKUP_VALIDATION_MODE", "lenient")
    monkeypatch.setenv("LOOKUP_NOT_FOUND_STATUS", "418")

    settings = get_settings()

    assert settings.validation_mode == "strict"
    assert settings.not_found_status == 500


def test_settings_non_numeric_not_found_status(monkeypatch):
    get_settings.cache_clear()
    monkeypatch.setenv("LOOKUP_NOT_FOUND_STATUS", "four-oh-four")

    assert get_settings().not_found_status == 500
