"""Pytest fixtures for resource decoding tests."""

import json
from pathlib import Path

import pytest

from gocardless_pro.config import SDKConfig, reset_config, set_config

FIXTURES_DIR = Path(__file__).parent / "fixtures"

_CONFIG_ENV_VARS = (
    "GOCARDLESS_SDK_CONFIG",
    "GOCARDLESS_STRICT_ENUMS",
    "GOCARDLESS_LOG_UNKNOWN_ENUMS",
    "GOCARDLESS_UNKNOWN_ENUM_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def sdk_config(monkeypatch):
    """Every test starts from default config, whatever the environment says."""
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    cfg = SDKConfig()
    set_config(cfg)
    yield cfg
    reset_config()


@pytest.fixture
def load_fixture():
    def _load(name: str):
        return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))

    return _load
