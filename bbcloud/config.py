"""Configuration loading from YAML and environment.

The app password is taken from the environment or from a file (Docker
secrets). Never put a real app password in a config file committed to a
repo. Nothing is loaded at import time; call load_config().
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Injected by load_config so secret resolution can read env/file
_current_env: dict[str, str] = {}


def _resolved(value: str | None) -> str | None:
    """Return None for empty values and ${VAR} placeholders left unsubstituted."""
    if not value or value.startswith("${"):
        return None
    return value


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = _current_env.get(env_key)
    if value:
        return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


class BitbucketConfig(BaseSettings):
    """Bitbucket Cloud credentials and target workspace."""

    model_config = SettingsConfigDict(env_prefix="BITBUCKET_", extra="ignore")

    username: str | None = Field(default=None, description="Account username for basic auth")
    app_password: str | None = Field(default=None, description="App password; prefer env or secret file")
    workspace: str | None = Field(default=None, description="Workspace slug, e.g. acme")
    repository: str | None = Field(default=None, description="Default repository slug (optional)")
    api_url: str = Field(default="https://api.bitbucket.org/2.0", description="API base URL")
    timeout: float | None = Field(default=30.0, gt=0, description="Per-request timeout in seconds")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    bitbucket: BitbucketConfig = Field(default_factory=BitbucketConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def app_password_resolved(self) -> str | None:
        """Resolve app password from config, env or Docker secret file."""
        p = _resolved(self.bitbucket.app_password)
        if p:
            return p
        return _read_secret("BITBUCKET_APP_PASSWORD", "BITBUCKET_APP_PASSWORD_FILE")

    def bitbucket_resolved(self) -> BitbucketConfig:
        """Bitbucket config with the app password resolved and unset
        placeholders cleared, so missing values fail the adapter checks."""
        b = self.bitbucket
        return b.model_copy(
            update={
                "username": _resolved(b.username),
                "app_password": self.app_password_resolved,
                "workspace": _resolved(b.workspace),
                "repository": _resolved(b.repository),
            }
        )


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def _env_overrides(prefix: str, fields: list[str]) -> dict[str, str]:
    """Collect PREFIX_FIELD env values for the given fields."""
    out = {}
    for name in fields:
        value = _current_env.get(f"{prefix}{name.upper()}")
        if value:
            out[name] = value
    return out


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    Environment (BITBUCKET_*, LOGGING_*) takes precedence over YAML. The
    app password may also come from BITBUCKET_APP_PASSWORD_FILE.
    """
    global _current_env

    _current_env = dict(os.environ)

    path = config_path or Path("config.yaml")
    raw: dict[str, Any] = {}
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
        raw = _substitute_env(raw)

    bitbucket_raw = {
        **(raw.get("bitbucket") or {}),
        **_env_overrides("BITBUCKET_", list(BitbucketConfig.model_fields)),
    }
    logging_raw = {
        **(raw.get("logging") or {}),
        **_env_overrides("LOGGING_", list(LoggingConfig.model_fields)),
    }

    return AppConfig(
        bitbucket=BitbucketConfig(**bitbucket_raw),
        logging=LoggingConfig(**logging_raw),
    )
