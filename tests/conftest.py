"""Shared fixtures."""

from unittest.mock import Mock

import pytest

from aisum import config


@pytest.fixture(autouse=True)
def settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Give every test a minimal, isolated environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LLM_API_KEY", "test-key")
    monkeypatch.setenv("CONFIG_DIR", str(tmp_path / "config"))
    for var in ("LLM_PROVIDER", "LLM_MODEL", "GEMINI_MODEL", "GOOGLE_API_KEY"):
        monkeypatch.delenv(var, raising=False)
    config._settings = None
    yield
    config._settings = None


@pytest.fixture
def mock_client() -> Mock:
    """LLM client double; set generate.return_value or side_effect per test."""
    return Mock()
