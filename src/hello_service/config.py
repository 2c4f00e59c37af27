"""
Environment-driven settings for the hello service.
"""
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

ENV_PREFIX = "HELLO_SERVICE_"


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    greeting_name: str = "World"
    service_name: str = "hello-service"
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``HELLO_SERVICE_*`` variables, falling back to defaults."""
        env = os.environ if environ is None else environ

        def get(name, default):
            return env.get(ENV_PREFIX + name, default)

        return cls(
            host=get("HOST", cls.host),
            port=_parse_port(get("PORT", str(cls.port))),
            greeting_name=_parse_name(get("GREETING_NAME", cls.greeting_name)),
            service_name=get("NAME", cls.service_name),
            log_level=_parse_log_level(get("LOG_LEVEL", cls.log_level)),
            log_file=get("LOG_FILE", None) or None,
        )


def _parse_port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}PORT must be an integer, got {value!r}") from None
    if not 0 < port < 65536:
        raise ConfigError(f"{ENV_PREFIX}PORT out of range: {port}")
    return port


def _parse_name(value: str) -> str:
    if not value.strip():
        raise ConfigError(f"{ENV_PREFIX}GREETING_NAME must not be blank")
    return value.strip()


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{ENV_PREFIX}LOG_LEVEL is not a logging level: {value!r}")
    return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings for the running process, read once."""
    return Settings.from_env()
