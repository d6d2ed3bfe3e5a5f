"""Request validation, signing and dispatch for the DealNews API."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

import httpx

from .auth import AuthHeaderProvider, http_date
from .config import ClientConfig
from .exceptions import DealNewsValidationError
from .models import NormalizedResponse
from .request_options import OptionsInput, coerce_options, validate_options
from .security import sanitize_headers
from .transport import Transport

logger = logging.getLogger(__name__)

# Formats that API endpoints can return, keyed by lowercase name.
ACCEPTED_FORMATS: Mapping[str, str] = {
    "json": "application/json",
    "xml": "text/xml,application/xml",
    "rss": "application/rss+xml",
}

SUPPORTED_METHODS = frozenset({"GET", "POST"})


def resolve_accept(format_: Any, default_format: Any) -> str | None:
    for candidate in (format_, default_format):
        if candidate and isinstance(candidate, str):
            accept = ACCEPTED_FORMATS.get(candidate.lower())
            if accept is not None:
                return accept
    return None


def merge_headers(base: Mapping[str, str], override: Mapping[str, Any]) -> dict[str, str]:
    """Merge ``override`` over ``base``; names compare case-insensitively."""
    merged = dict(base)
    for key, value in override.items():
        key = str(key)
        for existing in [name for name in merged if name.lower() == key.lower()]:
            del merged[existing]
        merged[key] = str(value)
    return merged


def normalize_response(response: httpx.Response) -> NormalizedResponse:
    encoding = response.headers.encoding
    headers: dict[str, list[str]] = {}
    # Names group case-insensitively under the first spelling received.
    spelling: dict[str, str] = {}
    for raw_key, raw_value in response.headers.raw:
        key = raw_key.decode(encoding)
        name = spelling.setdefault(key.lower(), key)
        headers.setdefault(name, []).append(raw_value.decode(encoding))
    return NormalizedResponse(status=response.status_code, headers=headers, body=response.content)


class RequestDispatcher:
    """Turns a validated option set into a signed transport call.

    ``config`` is read when each request is built, so changes made to it
    between calls apply to the next request.
    """

    def __init__(
        self,
        config: ClientConfig,
        authenticator: AuthHeaderProvider,
        transport: Transport,
        *,
        clock: Callable[[], str] = http_date,
    ) -> None:
        self.config = config
        self.authenticator = authenticator
        self.transport = transport
        self._clock = clock

    def request(self, method: str, path: str, options: OptionsInput = None) -> NormalizedResponse:
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise DealNewsValidationError(f"Unsupported request method: {method}")
        request_options = coerce_options(options)
        validate_options(method, request_options)

        default_format = self.config.default_format
        nocache = self.config.nocache
        verify_tls = self.config.verify_tls

        transport_options: dict[str, Any] = {
            "headers": self._build_headers(method, path, request_options.pop("format", None), default_format, nocache),
        }

        caller_headers = request_options.pop("headers", None)
        if caller_headers:
            transport_options["headers"] = merge_headers(transport_options["headers"], caller_headers)

        if verify_tls is not True:
            transport_options["verify"] = verify_tls

        for key, value in request_options.items():
            if value is not None:
                transport_options[key] = value

        logger.debug(
            "%s %s headers=%s",
            method,
            path,
            sanitize_headers(transport_options["headers"]),
        )
        response = self.transport.request(method, path, transport_options)
        logger.debug("%s %s -> %s", method, path, response.status_code)
        return normalize_response(response)

    def _build_headers(
        self,
        method: str,
        path: str,
        format_: Any,
        default_format: str,
        nocache: bool,
    ) -> dict[str, str]:
        headers = {"Accept-Encoding": "gzip,deflate"}

        accept = resolve_accept(format_, default_format)
        if accept is not None:
            headers["Accept"] = accept

        x_dn_date = self._clock()
        headers["Authorization"] = self.authenticator.compute_auth_header(path, method, x_dn_date)
        headers["x-dn-date"] = x_dn_date

        if nocache:
            headers["Cache-Control"] = "no-cache"

        return headers
