"""
Tests for loading the API key from the environment.
"""

import os
import sys
from unittest.mock import patch

import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from deepgram_tts.config import API_KEY_ENV_VAR, Settings
from deepgram_tts.errors import ErrorKind, MissingApiKeyError


class TestSettings:
    def test_reads_key_from_mapping(self):
        settings = Settings.from_env({"DEEPGRAM_API_KEY": "abc123"})
        assert settings.api_key == "abc123"

    def test_strips_surrounding_whitespace(self):
        assert Settings.from_env({"DEEPGRAM_API_KEY": "  abc123\n"}).api_key == "abc123"

    @pytest.mark.parametrize("environ", [{}, {"DEEPGRAM_API_KEY": ""}, {"DEEPGRAM_API_KEY": "   "}])
    def test_missing_key_names_variable(self, environ):
        with pytest.raises(MissingApiKeyError) as excinfo:
            Settings.from_env(environ)

        assert API_KEY_ENV_VAR in str(excinfo.value)
        assert excinfo.value.kind is ErrorKind.MISSING_API_KEY

    @patch("deepgram_tts.config.load_dotenv")
    def test_defaults_to_process_environment(self, mock_load_dotenv, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV_VAR, "from-env")

        settings = Settings.from_env()

        assert settings.api_key == "from-env"
        mock_load_dotenv.assert_called_once()

    @patch("deepgram_tts.config.load_dotenv")
    def test_unset_process_environment_fails(self, mock_load_dotenv, monkeypatch):
        monkeypatch.delenv(API_KEY_ENV_VAR, raising=False)

        with pytest.raises(MissingApiKeyError):
            Settings.from_env()

    def test_dotenv_file_is_loaded(self, tmp_path, monkeypatch):
        monkeypatch.delenv(API_KEY_ENV_VAR, raising=False)
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text(f"{API_KEY_ENV_VAR}=from-dotenv\n")

        try:
            assert Settings.from_env().api_key == "from-dotenv"
        finally:
            os.environ.pop(API_KEY_ENV_VAR, None)

    def test_environment_wins_over_dotenv(self, tmp_path, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV_VAR, "from-env")
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text(f"{API_KEY_ENV_VAR}=from-dotenv\n")

        assert Settings.from_env().api_key == "from-env"

    def test_repr_hides_key(self):
        assert "abc123" not in repr(Settings(api_key="abc123"))

    def test_settings_are_immutable(self):
        settings = Settings(api_key="abc123")
        with pytest.raises(AttributeError):
            settings.api_key = "other"
