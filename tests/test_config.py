"""Tests for configuration loading."""

import pytest

from scrapekit.config import load_config

ENV_OVERRIDES = ["SCRAPEKIT_TIMEOUT", "SCRAPEKIT_VERIFY_CERTIFICATES", "SCRAPEKIT_USER_AGENT", "LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    """Test packaged defaults and overrides."""

    def test_defaults(self):
        config = load_config()

        assert config["client"]["timeout"] == 10.0
        assert config["client"]["verify_certificates"] is False
        assert config["client"]["user_agent"] is None
        assert config["extraction"]["comparison"] == "ordinal"
        assert config["logging"]["level"] == "INFO"
        assert config["logging"]["format"] == "console"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SCRAPEKIT_TIMEOUT", "2.5")
        monkeypatch.setenv("SCRAPEKIT_VERIFY_CERTIFICATES", "yes")
        monkeypatch.setenv("SCRAPEKIT_USER_AGENT", "env-agent")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        config = load_config()

        assert config["client"]["timeout"] == 2.5
        assert config["client"]["verify_certificates"] is True
        assert config["client"]["user_agent"] == "env-agent"
        assert config["logging"]["level"] == "DEBUG"

    def test_falsey_certificate_flag(self, monkeypatch):
        monkeypatch.setenv("SCRAPEKIT_VERIFY_CERTIFICATES", "off")
        assert load_config()["client"]["verify_certificates"] is False

    def test_custom_file(self, tmp_path):
        """Missing sections are filled in as empty dicts."""
        path = tmp_path / "custom.yaml"
        path.write_text("extraction:\n  trim: true\n")

        config = load_config(path)

        assert config["extraction"]["trim"] is True
        assert config["client"] == {}
        assert config["logging"] == {}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        config = load_config(path)

        assert config == {"client": {}, "extraction": {}, "logging": {}}
