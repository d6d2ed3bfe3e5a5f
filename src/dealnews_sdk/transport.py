"""HTTP transport used by the dispatcher."""

from __future__ import annotations

import ssl
from typing import Any, Mapping, Protocol, Union

import httpx

VerifyTLS = Union[bool, str]


class Transport(Protocol):
    def request(self, method: str, path: str, options: Mapping[str, Any]) -> httpx.Response: ...

    def close(self) -> None: ...


def _ssl_verify(verify: VerifyTLS) -> Union[bool, ssl.SSLContext]:
    if isinstance(verify, str):
        return ssl.create_default_context(cafile=verify)
    return verify


class HttpxTransport:
    """Executes requests with ``httpx.Client``.

    Recognized option keys: ``headers``, ``query`` (sent as URL parameters),
    ``form_params`` (sent as an urlencoded body) and ``verify``. Certificate
    verification is fixed per ``httpx.Client``, so each distinct ``verify``
    directive gets its own client, created on first use and kept until
    :meth:`close`.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float,
        headers: Mapping[str, str] | None = None,
        httpx_transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client_kwargs: dict[str, Any] = {
            "base_url": base_url,
            "timeout": timeout,
            "headers": dict(headers or {}),
            "trust_env": False,
        }
        self._httpx_transport = httpx_transport
        self._httpx = self._build_client(None)
        self._verify_clients: dict[VerifyTLS, httpx.Client] = {}

    def _build_client(self, verify: VerifyTLS | None) -> httpx.Client:
        kwargs = dict(self._client_kwargs)
        if self._httpx_transport is not None:
            # A mounted transport owns its own TLS settings.
            kwargs["transport"] = self._httpx_transport
        elif verify is not None:
            kwargs["verify"] = _ssl_verify(verify)
        client = httpx.Client(**kwargs)
        # Accept is negotiated per request; an unknown format sends none at all.
        client.headers.pop("Accept", None)
        return client

    def _client_for(self, verify: VerifyTLS | None) -> httpx.Client:
        if verify is None:
            return self._httpx
        client = self._verify_clients.get(verify)
        if client is None:
            client = self._build_client(verify)
            self._verify_clients[verify] = client
        return client

    def request(self, method: str, path: str, options: Mapping[str, Any]) -> httpx.Response:
        client = self._client_for(options.get("verify"))
        return client.request(
            method,
            path,
            headers=options.get("headers"),
            params=options.get("query"),
            data=options.get("form_params"),
        )

    def close(self) -> None:
        self._httpx.close()
        for client in self._verify_clients.values():
            client.close()
        self._verify_clients.clear()
