from __future__ import annotations

import pytest

from ranger_provider.core.config import Settings


def test_defaults_without_environment() -> None:
    settings = Settings(_env_file=None)

    assert settings.ranger_host is None
    assert settings.ranger_username is None
    assert settings.ranger_password is None
    assert settings.request_timeout_seconds == 30.0
    assert settings.log_level == "INFO"
    assert settings.log_format == "detailed"
    assert settings.enable_file_logging is False


def test_values_bound_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RANGER_HOST", "http://ranger:6080")
    monkeypatch.setenv("RANGER_USERNAME", "admin")
    monkeypatch.setenv("RANGER_PASSWORD", "secret")
    monkeypatch.setenv("RANGER_REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("RANGER_PROVIDER_LOG_LEVEL", "DEBUG")

    settings = Settings(_env_file=None)

    assert settings.ranger_host == "http://ranger:6080"
    assert settings.ranger_username == "admin"
    assert settings.ranger_password == "secret"
    assert settings.request_timeout_seconds == 5.0
    assert settings.log_level == "DEBUG"


def test_values_loaded_from_env_file(tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("RANGER_HOST=http://from-file\nRANGER_PROVIDER_LOG_FORMAT=json\n")

    settings = Settings(_env_file=env_file)

    assert settings.ranger_host == "http://from-file"
    assert settings.log_format == "json"


def test_grouped_views() -> None:
    settings = Settings(
        _env_file=None,
        RANGER_HOST="http://mock",
        RANGER_USERNAME="u",
        RANGER_PASSWORD="p",
        RANGER_PROVIDER_LOG_FILE_DIR="/tmp/logs",
    )

    assert settings.ranger.host == "http://mock"
    assert settings.ranger.username == "u"
    assert settings.ranger.password == "p"
    assert settings.ranger.request_timeout_seconds == 30.0
    assert settings.logging.level == "INFO"
    assert settings.logging.file_dir == "/tmp/logs"
