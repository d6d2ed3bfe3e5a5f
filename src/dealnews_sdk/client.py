"""Synchronous client for the DealNews API."""

from __future__ import annotations

from typing import Any, Mapping, Union

import httpx
from pydantic import ValidationError

from .auth import AuthHeaderProvider, Authenticator
from .config import (
    DEFAULT_BASE_HOST,
    DEFAULT_TIMEOUT,
    ClientConfig,
    env_base_host,
    env_public_key,
    env_secret_key,
)
from .dispatcher import RequestDispatcher
from .exceptions import DealNewsValidationError
from .models import NormalizedResponse
from .request_options import OptionsInput
from .security import validate_base_host
from .transport import HttpxTransport, Transport


class DealNewsClient:
    """Signed GET/POST access to the DealNews API.

    ``default_format``, ``nocache`` and ``verify_tls`` can be changed on a
    live client and take effect on the next request.
    """

    def __init__(
        self,
        public_key: str | None = None,
        secret_key: str | None = None,
        base_host: str | None = None,
        transport: Transport | None = None,
        authenticator: AuthHeaderProvider | None = None,
        *,
        httpx_transport: httpx.BaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
        allow_http: bool = False,
    ) -> None:
        public_key = public_key or env_public_key()
        if not public_key:
            raise DealNewsValidationError("public_key is required")
        secret_key = secret_key if secret_key is not None else (env_secret_key() or "")

        try:
            self.config = ClientConfig(base_host=base_host or env_base_host() or DEFAULT_BASE_HOST, timeout=timeout)
        except ValidationError as exc:
            raise DealNewsValidationError(str(exc)) from exc
        validate_base_host(self.config.base_host, allow_http=allow_http)

        self.authenticator = authenticator or Authenticator(public_key, secret_key)
        if transport is None:
            default_headers = {"User-Agent": self.config.user_agent}
            if headers:
                default_headers.update(headers)
            transport = HttpxTransport(
                self.config.base_host,
                timeout=self.config.timeout,
                headers=default_headers,
                httpx_transport=httpx_transport,
            )
        self.transport = transport
        self._dispatcher = RequestDispatcher(self.config, self.authenticator, self.transport)

    def __enter__(self) -> "DealNewsClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.transport.close()

    @property
    def default_format(self) -> str:
        return self.config.default_format

    @default_format.setter
    def default_format(self, value: str) -> None:
        self._set_config("default_format", value)

    @property
    def nocache(self) -> bool:
        return self.config.nocache

    @nocache.setter
    def nocache(self, value: bool) -> None:
        self._set_config("nocache", value)

    @property
    def verify_tls(self) -> Union[bool, str]:
        return self.config.verify_tls

    @verify_tls.setter
    def verify_tls(self, value: Union[bool, str]) -> None:
        self._set_config("verify_tls", value)

    def _set_config(self, name: str, value: Any) -> None:
        try:
            setattr(self.config, name, value)
        except ValidationError as exc:
            raise DealNewsValidationError(f"invalid {name}: {value!r}") from exc

    def get(self, path: str, options: OptionsInput = None) -> NormalizedResponse:
        """Perform a GET request against an API endpoint, e.g. ``/features``.

        Raises InvalidOption or InvalidMethodOption before any network I/O
        when ``options`` is not valid for GET.
        """
        return self._dispatcher.request("GET", path, options)

    def post(self, path: str, options: OptionsInput = None) -> NormalizedResponse:
        """Perform a POST request against an API endpoint, e.g. ``/login``."""
        return self._dispatcher.request("POST", path, options)
