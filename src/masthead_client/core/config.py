from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from dotenv import find_dotenv, load_dotenv

from .client import (
    DEFAULT_HOST_URL,
    DEFAULT_TIMEOUT_SECONDS,
    MastheadClient,
    MissingTokenError,
)

TOKEN_ENV_VAR = "MASTHEAD_API_TOKEN"
HOST_ENV_VAR = "MASTHEAD_HOST"


@dataclass(frozen=True)
class ClientConfig:
    token: str
    base_url: str = DEFAULT_HOST_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __repr__(self) -> str:
        return (
            f"ClientConfig(token='***', base_url={self.base_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r})"
        )


def load_env_config(*, use_dotenv: bool = True) -> Tuple[str, str]:
    """Load Masthead host and API token from environment (optional .env)."""
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    base_url = os.getenv(HOST_ENV_VAR, "").strip()
    token = os.getenv(TOKEN_ENV_VAR, "").strip()
    return base_url, token


def resolve_config(
    token: Optional[str] = None,
    base_url: Optional[str] = None,
    *,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    use_dotenv: bool = True,
) -> ClientConfig:
    """
    Resolve client settings once: explicit arguments win over the environment.
    Raises MissingTokenError when no token is available from either source.
    """
    env_base_url, env_token = "", ""
    if not token or not base_url:
        env_base_url, env_token = load_env_config(use_dotenv=use_dotenv)

    token = token or env_token
    if not token:
        raise MissingTokenError(
            "Masthead API token is required. Pass it explicitly or set the "
            f"{TOKEN_ENV_VAR} environment variable."
        )

    return ClientConfig(
        token=token,
        base_url=base_url or env_base_url or DEFAULT_HOST_URL,
        timeout_seconds=timeout_seconds,
    )


def create_client_from_env(
    token: Optional[str] = None, base_url: Optional[str] = None, **kwargs: Any
) -> MastheadClient:
    """Create a MastheadClient, falling back to environment variables."""
    config = resolve_config(token, base_url)
    return MastheadClient.from_config(config, **kwargs)


__all__ = [
    "ClientConfig",
    "load_env_config",
    "resolve_config",
    "create_client_from_env",
    "TOKEN_ENV_VAR",
    "HOST_ENV_VAR",
]
