"""
Configuration (config.py)

Tests DispatchConfig validation and ConfigLoader precedence.
"""

import os

import pytest

from harrier.config import ConfigLoader, DispatchConfig
from harrier.faults import ConfigInvalidFault


class TestDispatchConfig:

    def test_defaults(self):
        config = DispatchConfig()
        assert config.controller_suffix == "controller"
        assert config.record_metadata is True
        assert config.strict_actions is True
        assert config.redirect_status == 302

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DispatchConfig().strict_actions = False

    def test_with_overrides(self):
        config = DispatchConfig().with_overrides(strict_actions=False)
        assert config.strict_actions is False
        assert config.record_metadata is True

    def test_empty_suffix_rejected(self):
        with pytest.raises(ConfigInvalidFault):
            DispatchConfig(controller_suffix="")

    def test_non_redirect_status_rejected(self):
        with pytest.raises(ConfigInvalidFault):
            DispatchConfig(redirect_status=200)


class TestConfigLoader:

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for key in list(os.environ):
            if key.startswith("HARRIER_"):
                monkeypatch.delenv(key)

    def test_defaults_without_sources(self):
        assert ConfigLoader.load() == DispatchConfig()

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("HARRIER_STRICT_ACTIONS", "false")
        monkeypatch.setenv("HARRIER_REDIRECT_STATUS", "303")

        config = ConfigLoader.load()
        assert config.strict_actions is False
        assert config.redirect_status == 303

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# dispatch settings\n"
            "HARRIER_CONTROLLER_SUFFIX=Handler\n"
            "HARRIER_RECORD_METADATA=no\n"
            "OTHER_SETTING=ignored\n"
        )

        config = ConfigLoader.load(env_file=str(env_file))
        assert config.controller_suffix == "Handler"
        assert config.record_metadata is False

    def test_missing_env_file_is_skipped(self, tmp_path):
        assert ConfigLoader.load(env_file=str(tmp_path / "missing.env")) == DispatchConfig()

    def test_precedence(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("HARRIER_REDIRECT_STATUS=301\n")
        monkeypatch.setenv("HARRIER_REDIRECT_STATUS", "307")

        assert ConfigLoader.load(env_file=str(env_file)).redirect_status == 307
        assert ConfigLoader.load(
            env_file=str(env_file), overrides={"redirect_status": 308},
        ).redirect_status == 308

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("HRTEST_STRICT_ACTIONS", "off")
        assert ConfigLoader.load(env_prefix="HRTEST_").strict_actions is False

    def test_unrelated_prefixed_variables_are_ignored(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HARRIER_HOME", "/opt/harrier")
        monkeypatch.setenv("HARRIER_STRICT_ACTIONS", "no")
        env_file = tmp_path / ".env"
        env_file.write_text("HARRIER_TIMEOUT=5\n")

        config = ConfigLoader.load(env_file=str(env_file))
        assert config == DispatchConfig(strict_actions=False)

    def test_unknown_override_key(self):
        with pytest.raises(ConfigInvalidFault) as exc_info:
            ConfigLoader.load(overrides={"timeout": 5})
        assert exc_info.value.metadata["key"] == "timeout"

    def test_bad_boolean(self, monkeypatch):
        monkeypatch.setenv("HARRIER_STRICT_ACTIONS", "maybe")
        with pytest.raises(ConfigInvalidFault):
            ConfigLoader.load()

    def test_bad_integer(self):
        with pytest.raises(ConfigInvalidFault):
            ConfigLoader.load(overrides={"redirect_status": "soon"})

    def test_parse_value(self):
        loader = ConfigLoader()
        assert loader._parse_value("yes") is True
        assert loader._parse_value("OFF") is False
        assert loader._parse_value("42") == 42
        assert loader._parse_value("text") == "text"
