"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

from ghactivity.exceptions import ConfigError

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_HTTP_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    """Runtime settings shared by the CLI and the HTTP API."""

    github_token: str | None = None
    github_user: str | None = None
    api_url: str = DEFAULT_API_URL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    deadline: float | None = None
    cors_origins: tuple[str, ...] = ("http://localhost:3000",)

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``GITHUB_*`` / ``GHACTIVITY_*`` variables.

        Blank values count as unset.  Raises :class:`ConfigError` when a
        numeric setting cannot be parsed.
        """
        cors = os.environ.get("GHACTIVITY_CORS_ORIGINS", "http://localhost:3000")
        return cls(
            github_token=_env_str("GITHUB_TOKEN"),
            github_user=_env_str("GITHUB_USER"),
            api_url=_env_str("GHACTIVITY_API_URL") or DEFAULT_API_URL,
            http_timeout=_env_float("GHACTIVITY_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
            deadline=_env_float("GHACTIVITY_DEADLINE", None),
            cors_origins=tuple(o.strip() for o in cors.split(",") if o.strip()),
        )


def _env_str(key: str) -> str | None:
    value = os.environ.get(key, "").strip()
    return value or None


def _env_float(key: str, default: float | None) -> float | None:
    raw = _env_str(key)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{key} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{key} must be positive, got {raw!r}")
    return value
