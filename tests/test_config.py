"""
Tests for searchkeys.config module.
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from searchkeys.config import SearchKeysConfig, load_config


class TestSearchKeysConfig:
    """Tests for SearchKeysConfig class."""

    @patch.dict(os.environ, {}, clear=True)
    def test_config_defaults(self):
        """Test default values without any environment."""
        config = SearchKeysConfig(_env_file=None)
        assert config.host == "http://localhost:7700"
        assert config.api_key is None
        assert config.timeout == 30.0
        assert config.debug is False

    def test_config_creation_with_kwargs(self):
        """Test creating config with keyword arguments."""
        config = SearchKeysConfig(
            host="https://search.example.com",
            api_key="masterKey",
            timeout=2.5,
            debug=True,
        )
        assert config.host == "https://search.example.com"
        assert config.api_key == "masterKey"
        assert config.timeout == 2.5
        assert config.debug is True

    def test_config_host_trailing_slash_removed(self):
        """Test the host is normalized."""
        config = SearchKeysConfig(host="http://localhost:7700/")
        assert config.host == "http://localhost:7700"

    def test_config_host_validation_invalid(self):
        """Test host validation with invalid URLs."""
        invalid_hosts = [
            "localhost:7700",
            "ftp://search.example.com",
            "",
        ]
        for host in invalid_hosts:
            with pytest.raises(ValidationError) as exc_info:
                SearchKeysConfig(host=host)
            assert "host must start with" in str(exc_info.value)

    def test_config_timeout_must_be_positive(self):
        """Test timeout validation."""
        with pytest.raises(ValidationError):
            SearchKeysConfig(timeout=0)

    @patch.dict(os.environ, {
        "SEARCHKEYS_HOST": "https://env.example.com",
        "SEARCHKEYS_API_KEY": "env-master-key",
        "SEARCHKEYS_TIMEOUT": "10",
        "SEARCHKEYS_DEBUG": "true",
    })
    def test_config_from_environment(self):
        """Test loading config from environment variables."""
        config = SearchKeysConfig()
        assert config.host == "https://env.example.com"
        assert config.api_key == "env-master-key"
        assert config.timeout == 10.0
        assert config.debug is True


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_config_with_kwargs(self):
        """Test load_config with keyword arguments."""
        config = load_config(host="http://search.test", api_key="masterKey")
        assert isinstance(config, SearchKeysConfig)
        assert config.host == "http://search.test"
        assert config.api_key == "masterKey"

    @patch.dict(os.environ, {
        "SEARCHKEYS_HOST": "https://env.example.com",
        "SEARCHKEYS_API_KEY": "env-master-key",
    })
    def test_load_config_kwargs_override_env(self):
        """Test that load_config kwargs override environment."""
        config = load_config(host="https://override.example.com", debug=True)
        assert config.host == "https://override.example.com"
        assert config.debug is True
        # Should still use env for the key
        assert config.api_key == "env-master-key"
