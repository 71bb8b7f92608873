"""Configuration management.

Loads from a TOML config file + environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings

from .engine import DEFAULT_PARSE_FORMATS, PythonCalendarEngine
from .enums import LogFormat
from .errors import ConfigError


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class ObservabilityConfig(BaseModel):
    log_level: str = "WARNING"
    log_format: LogFormat = LogFormat.CONSOLE


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Top-level settings.

    Values come from a TOML config file (see ``load_settings``); keys the
    file does not set fall back to environment variables
    (``FINDATE_DEFAULT_FORMAT``, ``FINDATE_OBSERVABILITY__LOG_LEVEL``, ...),
    then to the defaults below.  A key set in the file wins over its env var.
    """

    # Extra strptime formats tried after ISO-8601 when parsing text
    parse_formats: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PARSE_FORMATS)
    )
    # Pattern for `findate format` when none is given
    default_format: str = "%Y-%m-%d"

    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "FINDATE_", "env_nested_delimiter": "__"}


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional; ignored if missing).
        overrides: Dict of overrides to apply on top.

    Raises:
        ConfigError: If the file is not valid TOML or the values fail
            validation.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            try:
                with open(path, "rb") as f:
                    data = tomli.load(f)
            except tomli.TOMLDecodeError as exc:
                raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
            except OSError as exc:
                raise ConfigError(f"Cannot read config {path}: {exc}") from exc

    if overrides:
        data.update(overrides)

    try:
        return Settings(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc


def build_engine(settings: Settings) -> PythonCalendarEngine:
    """Engine configured with the settings' parse formats."""
    return PythonCalendarEngine(formats=settings.parse_formats)
