"""Tests for builder configuration."""

import os
from unittest.mock import patch

from sheets_builder.config import (
    DEFAULT_BASE_URL,
    BuilderConfig,
    _load_env_file,
    get_config_status,
)


class TestLoadEnvFile:
    """Test .env loading."""

    def test_missing_file(self, tmp_path):
        """Should load nothing when the file does not exist."""
        assert _load_env_file(tmp_path / ".env") == {}

    def test_parses_lines(self, tmp_path):
        """Should skip comments and strip quotes."""
        env_file = tmp_path / ".env"
        env_file.write_text('# comment\nGOOGLE_API_KEY="quoted"\nnot a pair\nOTHER=\'x\'\n')
        with patch.dict(os.environ, {}, clear=True):
            loaded = _load_env_file(env_file)
            assert loaded == {"GOOGLE_API_KEY": "quoted", "OTHER": "x"}
            assert os.environ["GOOGLE_API_KEY"] == "quoted"

    def test_export_prefix(self, tmp_path):
        """Should accept shell-style 'export KEY=value' lines."""
        env_file = tmp_path / ".env"
        env_file.write_text("export SHEETS_ACCESS_TOKEN=tok\n")
        with patch.dict(os.environ, {}, clear=True):
            assert _load_env_file(env_file) == {"SHEETS_ACCESS_TOKEN": "tok"}

    def test_environment_takes_precedence(self, tmp_path):
        """Should not override variables already set."""
        env_file = tmp_path / ".env"
        env_file.write_text("GOOGLE_API_KEY=from-file\n")
        with patch.dict(os.environ, {"GOOGLE_API_KEY": "from-env"}, clear=True):
            assert _load_env_file(env_file) == {}
            assert os.environ["GOOGLE_API_KEY"] == "from-env"


class TestBuilderConfig:
    """Test BuilderConfig construction."""

    def test_defaults(self):
        """Should default to the public API root and no auth."""
        config = BuilderConfig()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.api_key is None
        assert config.access_token is None
        assert not config.uses_token

    def test_from_env(self):
        """Should read configuration from environment variables."""
        env = {
            "SHEETS_BASE_URL": "http://localhost:9000",
            "GOOGLE_API_KEY": "env-key",
            "SHEETS_ACCESS_TOKEN": "env-token",
        }
        with patch.dict(os.environ, env, clear=True):
            config = BuilderConfig.from_env(env_file=None)
        assert config == BuilderConfig("http://localhost:9000", "env-key", "env-token")
        assert config.uses_token

    def test_from_env_file(self, tmp_path):
        """Should pick up settings from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("GOOGLE_API_KEY=file-key\n")
        with patch.dict(os.environ, {}, clear=True):
            config = BuilderConfig.from_env(env_file=env_file)
        assert config.api_key == "file-key"
        assert config.base_url == DEFAULT_BASE_URL

    def test_empty_values_are_unset(self):
        """Should treat empty variables as not configured."""
        with patch.dict(os.environ, {"GOOGLE_API_KEY": "", "SHEETS_ACCESS_TOKEN": ""}, clear=True):
            config = BuilderConfig.from_env(env_file=None)
        assert config.api_key is None
        assert config.access_token is None


class TestConfigStatus:
    """Test status reporting."""

    def test_bearer(self):
        """Should report bearer auth when a token is set."""
        status = get_config_status(BuilderConfig(api_key="k", access_token="t"))
        assert status["auth"] == "bearer"
        assert status["api_key"] is True

    def test_key(self):
        """Should report key auth when only an API key is set."""
        assert get_config_status(BuilderConfig(api_key="k"))["auth"] == "key"

    def test_none(self):
        """Should report no auth when nothing is set."""
        status = get_config_status(BuilderConfig())
        assert status == {
            "base_url": DEFAULT_BASE_URL,
            "api_key": False,
            "access_token": False,
            "auth": "none",
        }
