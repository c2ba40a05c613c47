"""Unit tests for SettingsManager."""

import os
import tempfile
from pathlib import Path

import pytest

from universal_translator.services import SettingsManager

MANAGED_VARS = (
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "TRANSLATOR_MAX_OUTPUT_TOKENS",
    "TRANSLATOR_REQUEST_TIMEOUT",
)


@pytest.fixture
def temp_env_dir():
    """Provide a temporary directory for .env files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Clean up managed variables from environment before and after test."""
    old_values = {name: os.environ.pop(name, None) for name in MANAGED_VARS}
    yield
    for name, value in old_values.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


@pytest.fixture
def settings(temp_env_dir, clean_env):
    """Provide a SettingsManager with a test .env file."""
    env_file = temp_env_dir / ".env"
    env_file.write_text("GEMINI_API_KEY=\n")
    return SettingsManager(project_root=temp_env_dir)


class TestSettingsManagerAPIKey:
    """Tests for API key management from .env file."""

    def test_get_api_key_returns_none_when_empty(self, settings):
        """API key should be None when .env has empty value."""
        assert settings.get_gemini_api_key() is None

    def test_get_api_key_returns_value_from_env(self, temp_env_dir, clean_env):
        """API key should be read from .env file."""
        env_file = temp_env_dir / ".env"
        env_file.write_text("GEMINI_API_KEY=test-key-123\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() == "test-key-123"

    def test_get_api_key_strips_whitespace(self, temp_env_dir, clean_env):
        """API key should strip leading/trailing whitespace."""
        os.environ["GEMINI_API_KEY"] = "  test-key  "

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() == "test-key"

    def test_get_api_key_returns_none_for_whitespace_only(self, temp_env_dir, clean_env):
        """API key should return None for whitespace-only value."""
        os.environ["GEMINI_API_KEY"] = "   "

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() is None

    def test_reload_env_updates_api_key(self, temp_env_dir, clean_env):
        """reload_env should pick up changes to .env file."""
        env_file = temp_env_dir / ".env"
        env_file.write_text("GEMINI_API_KEY=old-key\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() == "old-key"

        env_file.write_text("GEMINI_API_KEY=new-key\n")
        settings.reload_env()
        assert settings.get_gemini_api_key() == "new-key"

    def test_missing_env_file_has_no_default_key(self, temp_env_dir, clean_env):
        """Without .env or environment there is no built-in credential."""
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() is None


class TestSettingsManagerRequestOptions:
    """Tests for model and request tuning options."""

    def test_defaults(self, settings):
        assert settings.get_model_name() == "gemini-2.0-flash"
        assert settings.get_max_output_tokens() == 1000
        assert settings.get_request_timeout() == 30.0

    def test_values_from_env_file(self, temp_env_dir, clean_env):
        (temp_env_dir / ".env").write_text(
            "GEMINI_MODEL=gemini-2.5-flash-lite\n"
            "TRANSLATOR_MAX_OUTPUT_TOKENS=2048\n"
            "TRANSLATOR_REQUEST_TIMEOUT=12.5\n"
        )

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_model_name() == "gemini-2.5-flash-lite"
        assert settings.get_max_output_tokens() == 2048
        assert settings.get_request_timeout() == 12.5

    @pytest.mark.parametrize("raw", ["lots", "0", "-5"])
    def test_invalid_numbers_fall_back_to_defaults(self, temp_env_dir, clean_env, raw):
        os.environ["TRANSLATOR_MAX_OUTPUT_TOKENS"] = raw
        os.environ["TRANSLATOR_REQUEST_TIMEOUT"] = raw

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_max_output_tokens() == 1000
        assert settings.get_request_timeout() == 30.0
