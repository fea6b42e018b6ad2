"""Test Settings loading from defaults, TOML and environment."""

import pytest

from fraud_request.core.config import Settings, load_settings
from fraud_request.core.errors import ConfigError


class TestSettingsDefaults:
    def test_default_settings(self):
        settings = Settings()
        assert settings.email.validate_input is True
        assert settings.email.hash_address is False

    def test_observability_defaults(self):
        settings = Settings()
        assert settings.observability.log_level == "WARNING"
        assert settings.observability.log_format == "console"


class TestLoadSettings:
    def test_missing_file_uses_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "missing.toml")
        assert settings.email.validate_input is True

    def test_load_from_toml(self, tmp_path):
        path = tmp_path / "fraud.toml"
        path.write_text(
            "[email]\n"
            "hash_address = true\n"
            "\n"
            "[observability]\n"
            'log_level = "DEBUG"\n'
        )
        settings = load_settings(path)
        assert settings.email.hash_address is True
        assert settings.email.validate_input is True
        assert settings.observability.log_level == "DEBUG"

    def test_overrides_merge_into_sections(self, tmp_path):
        path = tmp_path / "fraud.toml"
        path.write_text("[email]\nhash_address = true\n")
        settings = load_settings(path, overrides={"email": {"validate_input": False}})
        assert settings.email.hash_address is True
        assert settings.email.validate_input is False

    def test_invalid_toml_raises(self, tmp_path):
        path = tmp_path / "broken.toml"
        path.write_text("[email\n")
        with pytest.raises(ConfigError, match="Cannot parse"):
            load_settings(path)

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("FRAUD_REQUEST_EMAIL__HASH_ADDRESS", "true")
        settings = load_settings()
        assert settings.email.hash_address is True
