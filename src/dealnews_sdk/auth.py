"""Authorization header construction for DealNews API access."""

from __future__ import annotations

import hashlib
import hmac
from email.utils import formatdate
from typing import Protocol

from .models import Credentials

AUTH_SCHEME = "DN"


class AuthHeaderProvider(Protocol):
    def compute_auth_header(self, path: str, method: str, timestamp: str) -> str: ...


def http_date() -> str:
    """Current time as an HTTP-date, the value sent in ``x-dn-date``."""
    return formatdate(usegmt=True)


class Authenticator:
    """Builds ``Authorization`` header values from a public/secret key pair.

    Without a secret key the header only identifies the caller
    (``DN <public_key>``). With one, the request method, path and date are
    signed with HMAC-SHA1 so the API can recompute and compare the digest:
    ``DN <public_key>:<hex digest>``.
    """

    def __init__(self, public_key: str, secret_key: str = "") -> None:
        self.credentials = Credentials(public_key=public_key, secret_key=secret_key)

    def compute_auth_header(self, path: str, method: str, timestamp: str) -> str:
        auth = f"{AUTH_SCHEME} {self.credentials.public_key}"
        if not self.credentials.is_public_only:
            auth += ":" + self._secret_hash(path, method, timestamp)
        return auth

    def _secret_hash(self, path: str, method: str, timestamp: str) -> str:
        message = f"{method}\n{path}\n{timestamp}"
        return hmac.new(
            self.credentials.secret_key.encode(),
            message.encode(),
            hashlib.sha1,
        ).hexdigest()
