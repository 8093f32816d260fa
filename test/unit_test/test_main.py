from __future__ import annotations

import json
import logging

import pytest

from ranger_provider import __version__
from ranger_provider.core.config import Settings
from ranger_provider.main import create_provider, describe, main

pytestmark = pytest.mark.usefixtures("restore_root_logger")


def test_create_provider_applies_logging_settings(tmp_path) -> None:
    settings = Settings(
        _env_file=None,
        RANGER_PROVIDER_LOG_LEVEL="WARNING",
        RANGER_PROVIDER_ENABLE_FILE_LOGGING="true",
        RANGER_PROVIDER_LOG_FILE_DIR=str(tmp_path),
    )

    provider = create_provider("1.0.0", settings=settings)

    assert provider.metadata() == {"type_name": "ranger", "version": "1.0.0"}
    handlers = logging.getLogger().handlers
    console = [h for h in handlers if not isinstance(h, logging.FileHandler)]
    files = [h for h in handlers if isinstance(h, logging.FileHandler)]
    assert [h.level for h in console] == [logging.WARNING]
    assert len(files) == 1


def test_created_provider_configures_from_its_settings() -> None:
    settings = Settings(_env_file=None, RANGER_HOST="http://mock", RANGER_USERNAME="u", RANGER_PASSWORD="p")

    result = create_provider(settings=settings).configure(None)

    assert result.ok
    assert result.value.base_url == "http://mock"


def test_describe_lists_resources_and_data_sources() -> None:
    provider = create_provider(settings=Settings(_env_file=None))

    described = describe(provider)

    assert described["provider"]["version"] == __version__
    assert set(described["schema"]["properties"]) == {"host", "username", "password"}
    assert list(described["resources"]) == ["ranger_policy"]
    assert list(described["data_sources"]) == ["ranger_service"]


def test_main_prints_json(monkeypatch: pytest.MonkeyPatch, tmp_path, capsys: pytest.CaptureFixture) -> None:
    monkeypatch.chdir(tmp_path)

    main()

    out = json.loads(capsys.readouterr().out)
    assert out["provider"]["type_name"] == "ranger"
    assert "resources" in out["resources"]["ranger_policy"]["properties"]
