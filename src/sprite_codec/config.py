"""
sprite_codec Configuration
==========================

This module handles configuration loading for the sprite sheet decoders.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. sprite_codec.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    SPRITE_CODEC_STRICT             -> decode.strict
    SPRITE_CODEC_LEADING_SKIP_UNIT  -> decode.leading_skip_unit
    SPRITE_CODEC_EXPORT_DIR         -> export.output_dir
    SPRITE_CODEC_EXPORT_SCALE       -> export.scale
    SPRITE_CODEC_LOG_LEVEL          -> logging.level
    SPRITE_CODEC_LOG_FORMAT         -> logging.format

Example:
    from sprite_codec.config import settings

    print(settings.decode.strict)
    print(settings.export.output_dir)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator


logger = logging.getLogger(__name__)


LEADING_SKIP_UNITS = ("pixels", "rows")
LOG_FORMATS = ("json", "text")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


# =============================================================================
# Configuration Models
# =============================================================================

class DecodeConfig(BaseModel):
    """Decoder behaviour configuration."""

    strict: bool = Field(
        default=True,
        description="Raise on truncated or overrunning data instead of tolerating it",
    )
    leading_skip_unit: str = Field(
        default="pixels",
        description="Unit of the per-frame leading skip byte: 'pixels' or 'rows'",
    )

    @field_validator("leading_skip_unit")
    @classmethod
    def validate_leading_skip_unit(cls, v: str) -> str:
        """Ensure the unit is one the RLE decoder understands."""
        v = v.lower()
        if v not in LEADING_SKIP_UNITS:
            raise ValueError(
                f"leading_skip_unit must be one of {LEADING_SKIP_UNITS}, got {v!r}"
            )
        return v


class ExportConfig(BaseModel):
    """PNG frame export configuration."""

    output_dir: str = Field(default="./out", description="Directory for exported frames")
    scale: int = Field(
        default=1,
        ge=1,
        le=16,
        description="Nearest-neighbour upscale factor for exported frames",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        v = v.lower()
        if v not in LOG_FORMATS:
            raise ValueError(f"format must be one of {LOG_FORMATS}, got {v!r}")
        return v


class Settings(BaseModel):
    """
    Main settings class for sprite_codec.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    decode: DecodeConfig = Field(default_factory=DecodeConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to sprite_codec.yaml. If None, searches the
            working directory.

    Returns:
        Settings: Loaded configuration
    """
    if config_path is None:
        search_paths = [
            Path("sprite_codec.yaml"),
            Path("sprite_codec.yml"),
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.debug("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Decode settings
    if env_strict := os.environ.get("SPRITE_CODEC_STRICT"):
        config_data.setdefault("decode", {})["strict"] = _parse_bool(
            "SPRITE_CODEC_STRICT", env_strict
        )
    if env_unit := os.environ.get("SPRITE_CODEC_LEADING_SKIP_UNIT"):
        config_data.setdefault("decode", {})["leading_skip_unit"] = env_unit

    # Export settings
    if env_dir := os.environ.get("SPRITE_CODEC_EXPORT_DIR"):
        config_data.setdefault("export", {})["output_dir"] = env_dir
    if env_scale := os.environ.get("SPRITE_CODEC_EXPORT_SCALE"):
        config_data.setdefault("export", {})["scale"] = int(env_scale)

    # Logging settings
    if env_log := os.environ.get("SPRITE_CODEC_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_fmt := os.environ.get("SPRITE_CODEC_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_fmt


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Global settings instance - loaded on import
settings = load_config()
