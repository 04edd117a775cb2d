"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (SOLRBRIDGE_ prefix)
  2. YAML config file (SOLRBRIDGE_CONFIG, else ./solrbridge-config.yaml)
  3. Default values
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from solrbridge.core.translator import DEFAULT_INDEX, DEFAULT_KIND

CONFIG_ENV_VAR = "SOLRBRIDGE_CONFIG"
CONFIG_FILENAME = "solrbridge-config.yaml"


class ServerSettings(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(default=8080, description="Server port")
    workers: int = Field(default=4, description="Number of worker processes")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")


class BackendSettings(BaseModel):
    """OpenSearch connection configuration."""

    hosts: list[str] = Field(default_factory=lambda: ["http://localhost:9200"], description="OpenSearch node URLs")
    username: str | None = Field(default=None, description="Basic-auth username")
    password: str | None = Field(default=None, description="Basic-auth password")
    verify_certs: bool = Field(default=True, description="Verify TLS certificates")
    timeout: float = Field(default=30.0, gt=0, description="Per-request timeout in seconds")
    kind_field: str | None = Field(
        default=None,
        description="Document field matched against the Solr 'type' scope (unset: kinds are not filtered)",
    )
    extra: dict[str, Any] = Field(default_factory=dict, description="Extra AsyncOpenSearch keyword arguments")

    @field_validator("hosts", mode="before")
    @classmethod
    def _parse_hosts(cls, v: Any) -> list[str]:
        """Parse hosts from JSON string (env var) or list."""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return [str(h) for h in parsed]
            except (json.JSONDecodeError, TypeError):
                pass
            # Single host or comma-separated hosts as plain string
            return [h.strip() for h in v.split(",") if h.strip()]
        return list(v)


class SelectSettings(BaseModel):
    """Defaults for the Solr select handler."""

    default_index: str = Field(default=DEFAULT_INDEX, description="Collection searched when no index is given")
    default_kind: str = Field(default=DEFAULT_KIND, description="Document kind searched when no type is given")


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the SOLRBRIDGE_ prefix.
    Nested settings use double underscores: SOLRBRIDGE_SERVER__PORT=9090

    Example:
        SOLRBRIDGE_SERVER__PORT=9090
        SOLRBRIDGE_BACKEND__HOSTS='["https://search-1:9200", "https://search-2:9200"]'
        SOLRBRIDGE_SELECT__DEFAULT_INDEX=products
    """

    model_config = {
        "env_prefix": "SOLRBRIDGE_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    # Application metadata
    app_name: str = Field(default="solrbridge", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    # Component settings
    server: ServerSettings = Field(default_factory=ServerSettings)
    backend: BackendSettings = Field(default_factory=BackendSettings)
    select: SelectSettings = Field(default_factory=SelectSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        # Values set through the environment win over the file.
        env_values = cls().model_dump(exclude_unset=True)
        return cls(**_deep_merge(data, env_values))


def load_settings() -> Settings:
    """Load settings the way both the CLI and the server worker do.

    The YAML file named by ``SOLRBRIDGE_CONFIG`` is used when set, otherwise
    ``solrbridge-config.yaml`` in the working directory when present.
    """
    config_path = os.environ.get(CONFIG_ENV_VAR)
    if config_path:
        return Settings.from_yaml(config_path)
    if Path(CONFIG_FILENAME).exists():
        return Settings.from_yaml(CONFIG_FILENAME)
    return Settings()


def _deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged
