"""Tests for ClientConfig loading."""

import pytest

from cdaclient.config import DEFAULT_SERVER, PREVIEW_SERVER, ClientConfig


class TestClientConfig:
    def test_defaults(self) -> None:
        config = ClientConfig()
        assert config.server == DEFAULT_SERVER
        assert config.scheme == "https"
        assert config.host == DEFAULT_SERVER
        assert config.preview_mode is False

    def test_preview_host(self) -> None:
        assert ClientConfig(preview_mode=True).host == PREVIEW_SERVER

    def test_yaml_values(self) -> None:
        values = ClientConfig.values_from_yaml("server: cda.local\nsecure: false\nunknown: 1\ntimeout:\n")
        assert values == {"server": "cda.local", "secure": False}

    def test_empty_yaml(self) -> None:
        assert ClientConfig.values_from_yaml("") == {}

    def test_yaml_must_be_mapping(self) -> None:
        with pytest.raises(ValueError, match="mapping"):
            ClientConfig.values_from_yaml("- server\n- cda.local\n")

    def test_env_values(self) -> None:
        environ = {"CDA_PREVIEW_MODE": "true", "CDA_TIMEOUT": "5", "CDA_UNKNOWN": "x", "TIMEOUT": "9"}
        assert ClientConfig.values_from_env(environ) == {"preview_mode": "true", "timeout": "5"}

    def test_env_values_default_to_process_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("CDA_USER_AGENT", "tests")
        assert ClientConfig.values_from_env()["user_agent"] == "tests"

    def test_load_env_overrides_yaml(self, monkeypatch) -> None:
        monkeypatch.setenv("CDA_SERVER", "from-env.example.com")
        config = ClientConfig.load("server: from-yaml.example.com\nlogging_format: json\n")
        assert config.server == "from-env.example.com"
        assert config.logging_format == "json"
