"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking
  `os.environ` lookups into adapters or the CLI.
- The settings object is built once at the entry point and passed down
  explicitly, so every component reads the same validated values.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "confluence-mcp"

CREDENTIAL_ENV_VARS = (
    "ATLASSIAN_SITE_NAME",
    "ATLASSIAN_USER_EMAIL",
    "ATLASSIAN_API_TOKEN",
)

TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Write or update variables in the user's global .env file."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# confluence-mcp user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application configuration.

    The Atlassian values are optional on purpose: a missing credential is a
    "feature unavailable" signal handled by the transport, not a startup
    failure.
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the per-user config file.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    atlassian_site_name: str | None = Field(
        default=None,
        description="Atlassian Cloud site name (the `<site>` in <site>.atlassian.net).",
    )
    atlassian_user_email: str | None = Field(
        default=None,
        description="Email of the Atlassian account used for Basic auth.",
    )
    atlassian_api_token: str | None = Field(
        default=None,
        description="Atlassian API token paired with the user email.",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="confluence-mcp/0.1",
        min_length=1,
        description="User-Agent sent to the Atlassian API.",
    )

    @field_validator("debug", mode="before")
    @classmethod
    def _lenient_debug(cls, value: object) -> object:
        # Any other string, such as `DEBUG=*`, means off.
        if isinstance(value, str):
            return value.strip().lower() in TRUTHY_VALUES
        return value


def missing_credentials(settings: AppSettings) -> list[str]:
    """Names of the credential variables that are unset or blank."""

    values = (
        settings.atlassian_site_name,
        settings.atlassian_user_email,
        settings.atlassian_api_token,
    )
    return [name for name, value in zip(CREDENTIAL_ENV_VARS, values) if not (value or "").strip()]
