from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import httpx
import pytest
from dotenv import load_dotenv

from ranger_provider.core.logging_config import MODULE_LOG_LEVELS

# Load dotenv files early so test fixtures can read values via os.getenv
TEST_ROOT = Path(__file__).resolve().parent
load_dotenv(TEST_ROOT / ".env", override=False)


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    """Fail any HTTP request that would leave the machine.

    Tests talk to fake Ranger servers mounted with `httpx.MockTransport` at
    `http://mock`; anything else is a bug in the test.
    """
    allowed_prefixes: Iterable[str] = (
        "http://mock",
        "https://mock",
        "http://localhost",
        "http://127.0.0.1",
    )

    orig_sync = httpx._client.Client.request

    def _is_allowed(url_str: str) -> bool:
        return any(url_str.startswith(p) for p in allowed_prefixes)

    def offline_sync(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return orig_sync(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard: {url_str}")

    monkeypatch.setattr(httpx._client.Client, "request", offline_sync, raising=True)


@pytest.fixture(autouse=True)
def _isolated_ranger_env(monkeypatch: pytest.MonkeyPatch):
    """Keep developer RANGER_* variables from leaking into settings-based tests."""
    for name in (
        "RANGER_HOST",
        "RANGER_USERNAME",
        "RANGER_PASSWORD",
        "RANGER_REQUEST_TIMEOUT",
        "RANGER_PROVIDER_LOG_LEVEL",
        "RANGER_PROVIDER_LOG_FORMAT",
        "RANGER_PROVIDER_ENABLE_FILE_LOGGING",
        "RANGER_PROVIDER_LOG_FILE_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def restore_root_logger():
    """Undo `setup_logging` side effects on the root and module loggers."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    module_levels = {name: logging.getLogger(name).level for name in MODULE_LOG_LEVELS}
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
    for name, module_level in module_levels.items():
        logging.getLogger(name).setLevel(module_level)
