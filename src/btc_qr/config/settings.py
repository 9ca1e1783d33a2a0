"""Application settings loaded from environment variables and config files.

Configuration is loaded from (highest priority first):
1. Environment variables (prefix: ``BTCQR_``, nested via ``__``)
2. YAML config file (``config_path`` field or ``BTCQR_CONFIG_PATH`` env var)
3. Defaults defined here
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from btc_qr.render.qr import RenderOptions

_HEX_COLOUR = re.compile(r"^#[0-9a-fA-F]{6}$")

# ---------------------------------------------------------------------------
# Sub-config models
# ---------------------------------------------------------------------------


class ServerConfig(BaseSettings):
    """HTTP server settings."""

    model_config = SettingsConfigDict(
        env_prefix="BTCQR_SERVER__",
        case_sensitive=False,
    )

    host: str = "127.0.0.1"
    port: int = 3004


class RenderConfig(BaseSettings):
    """QR rasterisation defaults."""

    model_config = SettingsConfigDict(
        env_prefix="BTCQR_RENDER__",
        case_sensitive=False,
    )

    width_px: int = Field(default=400, ge=21, le=4096, description="Output image width")
    margin_modules: int = Field(default=2, ge=0, le=16, description="Quiet zone in modules")
    foreground: str = "#1e1e1e"
    background: str = "#ffffff"

    @field_validator("foreground", "background")
    @classmethod
    def _check_colour(cls, value: str) -> str:
        if not _HEX_COLOUR.match(value):
            msg = f"colour must be #rrggbb, got {value!r}"
            raise ValueError(msg)
        return value.lower()

    def to_options(self) -> RenderOptions:
        """Build the default :class:`RenderOptions` for the renderer."""
        return RenderOptions(
            width_px=self.width_px,
            margin_modules=self.margin_modules,
            foreground=self.foreground,
            background=self.background,
        )


class WordlistConfig(BaseSettings):
    """Seed-word vocabulary settings."""

    model_config = SettingsConfigDict(
        env_prefix="BTCQR_WORDLIST__",
        case_sensitive=False,
    )

    language: str = "english"


class MetricsConfig(BaseSettings):
    """Prometheus metrics settings."""

    model_config = SettingsConfigDict(
        env_prefix="BTCQR_METRICS__",
        case_sensitive=False,
    )

    enabled: bool = True


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------


def _load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML configuration file and return its contents as a dict.

    Returns an empty dict if the file doesn't exist or is empty.
    """
    p = Path(path)
    if not p.exists():
        return {}
    text = p.read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    return data if isinstance(data, dict) else {}


class AppConfig(BaseSettings):
    """Top-level application configuration.

    Loads settings from environment variables (``BTCQR_`` prefix),
    an optional YAML file, and built-in defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="BTCQR_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    debug: bool = False
    config_path: str = ""

    server: ServerConfig = Field(default_factory=ServerConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    wordlist: WordlistConfig = Field(default_factory=WordlistConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)

    @model_validator(mode="before")
    @classmethod
    def _merge_yaml(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Merge YAML config file contents under the env var overrides."""
        config_path = values.get("config_path", "")
        if not config_path:
            return values
        yaml_data = _load_yaml(config_path)
        # YAML values serve as defaults; env vars (already in *values*) win.
        for key, val in yaml_data.items():
            if key not in values or values[key] is None:
                values[key] = val
            elif isinstance(val, dict) and isinstance(values.get(key), dict):
                values[key] = {**val, **values[key]}
        return values

    @classmethod
    def from_yaml(cls, path: str | Path) -> Self:
        """Construct ``AppConfig`` loading defaults from a YAML file.

        Environment variables still override YAML values.
        """
        return cls(config_path=str(path))
