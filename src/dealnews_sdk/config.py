"""Client configuration."""

from __future__ import annotations

import os
from typing import Union

from pydantic import BaseModel, ConfigDict, field_validator

from .version import __version__

DEFAULT_BASE_HOST = "https://api.dealnews.com"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = f"dealnews-api-python-sdk/{__version__}"

PUBLIC_KEY_ENV_VAR = "DEALNEWS_API_PUBLIC_KEY"
SECRET_KEY_ENV_VAR = "DEALNEWS_API_SECRET_KEY"
BASE_URL_ENV_VAR = "DEALNEWS_API_BASE_URL"


class ClientConfig(BaseModel):
    """Settings read by the dispatcher each time a request is built.

    ``default_format``, ``nocache`` and ``verify_tls`` may be reassigned on a
    live client; assignments are validated.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    base_host: str = DEFAULT_BASE_HOST
    default_format: str = "json"
    nocache: bool = False
    verify_tls: Union[bool, str] = True
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("base_host")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("verify_tls")
    @classmethod
    def _check_ca_bundle(cls, value: Union[bool, str]) -> Union[bool, str]:
        if isinstance(value, str) and not value.strip():
            raise ValueError("verify_tls path must not be empty")
        return value

    @field_validator("timeout")
    @classmethod
    def _check_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be greater than 0")
        return value


def env_public_key() -> str | None:
    return os.getenv(PUBLIC_KEY_ENV_VAR)


def env_secret_key() -> str | None:
    return os.getenv(SECRET_KEY_ENV_VAR)


def env_base_host() -> str | None:
    return os.getenv(BASE_URL_ENV_VAR)
