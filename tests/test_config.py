"""
Configuration Tests
===================

Tests for YAML + environment configuration loading.
"""

import logging

import pytest
from pydantic import ValidationError

from sprite_codec.config import DecodeConfig, Settings, load_config, setup_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the caller's environment and working directory."""
    for name in (
        "SPRITE_CODEC_STRICT",
        "SPRITE_CODEC_LEADING_SKIP_UNIT",
        "SPRITE_CODEC_EXPORT_DIR",
        "SPRITE_CODEC_EXPORT_SCALE",
        "SPRITE_CODEC_LOG_LEVEL",
        "SPRITE_CODEC_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestSettingsDefaults:
    """Tests for default values."""

    def test_defaults(self):
        settings = load_config()

        assert settings.decode.strict is True
        assert settings.decode.leading_skip_unit == "pixels"
        assert settings.export.scale == 1
        assert settings.logging.level == "INFO"

    def test_invalid_leading_skip_unit(self):
        with pytest.raises(ValidationError):
            DecodeConfig(leading_skip_unit="bytes")

    def test_leading_skip_unit_case_insensitive(self):
        assert DecodeConfig(leading_skip_unit="ROWS").leading_skip_unit == "rows"

    def test_scale_bounds(self):
        with pytest.raises(ValidationError):
            Settings.model_validate({"export": {"scale": 0}})


class TestLoadConfig:
    """Tests for file and environment sources."""

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("decode:\n  strict: false\n  leading_skip_unit: rows\n")

        settings = load_config(str(path))

        assert settings.decode.strict is False
        assert settings.decode.leading_skip_unit == "rows"

    def test_yaml_found_in_working_directory(self, tmp_path):
        (tmp_path / "sprite_codec.yaml").write_text("export:\n  scale: 4\n")

        assert load_config().export.scale == 4

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(str(path)).decode.strict is True

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("decode:\n  strict: true\nexport:\n  output_dir: from_yaml\n")
        monkeypatch.setenv("SPRITE_CODEC_STRICT", "off")
        monkeypatch.setenv("SPRITE_CODEC_EXPORT_DIR", "from_env")

        settings = load_config(str(path))

        assert settings.decode.strict is False
        assert settings.export.output_dir == "from_env"

    def test_env_numeric_and_logging(self, monkeypatch):
        monkeypatch.setenv("SPRITE_CODEC_EXPORT_SCALE", "3")
        monkeypatch.setenv("SPRITE_CODEC_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SPRITE_CODEC_LOG_FORMAT", "json")
        monkeypatch.setenv("SPRITE_CODEC_LEADING_SKIP_UNIT", "rows")

        settings = load_config()

        assert settings.export.scale == 3
        assert settings.logging.level == "DEBUG"
        assert settings.logging.format == "json"
        assert settings.decode.leading_skip_unit == "rows"

    def test_invalid_bool_env(self, monkeypatch):
        monkeypatch.setenv("SPRITE_CODEC_STRICT", "maybe")
        with pytest.raises(ValueError):
            load_config()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_applies_level(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

        setup_logging(Settings.model_validate({"logging": {"level": "warning"}}))

        assert calls["level"] == logging.WARNING
        assert "%(levelname)s" in calls["format"]
