"""Security helpers for the DealNews client."""

from __future__ import annotations

from typing import Mapping
from urllib.parse import urlparse

from .auth import AUTH_SCHEME

REDACTED = "[REDACTED]"

SENSITIVE_HEADERS = {
    "cookie",
    "set-cookie",
}


def redact_authorization(value: str) -> str:
    """Hide the signature of a ``DN <public_key>:<digest>`` header.

    The public key identifies the caller and is kept; anything that does not
    look like a ``DN`` header is hidden entirely.
    """
    scheme, _, credentials = value.partition(" ")
    if scheme != AUTH_SCHEME or not credentials:
        return REDACTED
    public_key, sep, _ = credentials.partition(":")
    if not sep:
        return value
    return f"{AUTH_SCHEME} {public_key}:{REDACTED}"


def sanitize_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return request headers safe to write to debug logs."""
    redacted: dict[str, str] = {}
    for key, value in headers.items():
        lowered = key.lower()
        if lowered == "authorization":
            redacted[key] = redact_authorization(value)
        elif lowered in SENSITIVE_HEADERS:
            redacted[key] = REDACTED
        else:
            redacted[key] = value
    return redacted


def validate_base_host(url: str, *, allow_http: bool = False) -> None:
    """Check that ``url`` is a bare scheme and host the API can be reached at.

    Request paths are signed exactly as passed to ``get``/``post``, so a base
    host carrying its own path, query or credentials would make the signed
    path differ from the one the server sees.
    """
    if "\x00" in url:
        raise ValueError("Invalid base_host")
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"base_host must include scheme and host, got {url!r}")
    if parsed.scheme not in {"http", "https"}:
        raise ValueError(f"Unsupported base_host scheme: {parsed.scheme}")
    if parsed.username or parsed.password:
        raise ValueError("base_host must not embed credentials; pass public_key/secret_key instead")
    if parsed.path not in {"", "/"} or parsed.params or parsed.query or parsed.fragment:
        raise ValueError(f"base_host must not include a path, query or fragment, got {url!r}")
    if parsed.scheme == "http" and not allow_http:
        host = (parsed.hostname or "").lower()
        if host not in {"localhost", "127.0.0.1", "::1"}:
            raise ValueError("Non-HTTPS base_host is not allowed without allow_http=True")
