"""Runtime settings read from the environment.

Centralizes environment variable names and defaults. The CLI loads a
`.env` file with python-dotenv before calling `load_settings()`.

Environment variables:
    CLIENT_URL: Cross-origin caller allowed by the API (optional)
    FLOATCHAT_HOST: API bind host (default: 127.0.0.1)
    PORT: API port (default: 3000)
    FLOATCHAT_RESPONSE_DELAY: Simulated reply latency in seconds (default: 1.5)
    FLOATCHAT_SEED: Seed for the currents velocity draw (optional)
    FLOATCHAT_LOG_LEVEL: debug, info, warning or error (optional)
"""

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from .chat import DEFAULT_RESPONSE_DELAY

# Frontend dev server origin, always allowed alongside CLIENT_URL
LOCAL_DEV_ORIGIN = "http://localhost:5173"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000

LOG_LEVELS = ("debug", "info", "warning", "error")

# Settings field -> environment variable, for error messages
ENV_NAMES = {
    "client_url": "CLIENT_URL",
    "host": "FLOATCHAT_HOST",
    "port": "PORT",
    "response_delay": "FLOATCHAT_RESPONSE_DELAY",
    "seed": "FLOATCHAT_SEED",
    "log_level": "FLOATCHAT_LOG_LEVEL",
}


class ConfigError(ValueError):
    """Raised when an environment value cannot be used."""


class Settings(BaseModel):
    """FloatChat runtime settings."""

    client_url: str | None = Field(default=None, description="Allowed cross-origin caller")
    host: str = Field(default=DEFAULT_HOST)
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    response_delay: float = Field(default=DEFAULT_RESPONSE_DELAY, ge=0)
    seed: int | None = Field(default=None, description="Seed for synthetic chart data")
    log_level: str | None = Field(default=None, description="Trace level, None to disable")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if value.lower() not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return value.lower()

    @property
    def allowed_origins(self) -> list[str]:
        """Origins permitted by the API's CORS policy."""
        origins = [self.client_url] if self.client_url else []
        if LOCAL_DEV_ORIGIN not in origins:
            origins.append(LOCAL_DEV_ORIGIN)
        return origins


def _parse(env: Mapping[str, str], name: str, cast: type, default):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be {cast.__name__}, got {raw!r}") from None


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build settings from environment variables.

    Args:
        env: Mapping to read instead of `os.environ`

    Returns:
        Validated settings

    Raises:
        ConfigError: If a value is malformed or out of range
    """
    env = os.environ if env is None else env

    values = {
        "client_url": env.get("CLIENT_URL") or None,
        "host": env.get("FLOATCHAT_HOST") or DEFAULT_HOST,
        "port": _parse(env, "PORT", int, DEFAULT_PORT),
        "response_delay": _parse(env, "FLOATCHAT_RESPONSE_DELAY", float, DEFAULT_RESPONSE_DELAY),
        "seed": _parse(env, "FLOATCHAT_SEED", int, None),
        "log_level": env.get("FLOATCHAT_LOG_LEVEL") or None,
    }
    try:
        return Settings(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{ENV_NAMES.get(str(error['loc'][0]), error['loc'][0])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigError(problems) from None
