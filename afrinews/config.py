"""
Configuration for the news client.

All environment variables are read here. No os.environ access elsewhere in the package.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://newsapi.org/v2"
DEFAULT_PAGE_SIZE = 20
DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class NewsConfig:
    """Read-only settings consumed by NewsClient. Not validated by the client."""
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    page_size: int = DEFAULT_PAGE_SIZE
    language: str = DEFAULT_LANGUAGE
    request_timeout: Optional[float] = None  # None = wait forever

    @property
    def everything_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/everything"


def _require_env(env: Mapping[str, str], name: str, description: str) -> str:
    value = env.get(name)
    if not value:
        raise ConfigurationError(
            f"Missing required environment variable: {name}\n"
            f"Description: {description}\n"
            f"Please set this in your .env file or environment."
        )
    return value


def _optional_env_int(env: Mapping[str, str], name: str, default: int) -> int:
    value = env.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"Invalid integer value for {name}: {value}")


def _optional_env_float(env: Mapping[str, str], name: str) -> Optional[float]:
    value = env.get(name)
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"Invalid number for {name}: {value}")


def load_config(env: Optional[Mapping[str, str]] = None) -> NewsConfig:
    """Build a NewsConfig from environment variables (or the given mapping)."""
    if env is None:
        env = os.environ
    return NewsConfig(
        api_key=_require_env(env, "NEWSAPI_KEY", "API key for newsapi.org"),
        base_url=env.get("NEWSAPI_BASE_URL") or DEFAULT_BASE_URL,
        page_size=_optional_env_int(env, "NEWSAPI_PAGE_SIZE", DEFAULT_PAGE_SIZE),
        language=env.get("NEWSAPI_LANGUAGE") or DEFAULT_LANGUAGE,
        request_timeout=_optional_env_float(env, "NEWSAPI_TIMEOUT"),
    )
