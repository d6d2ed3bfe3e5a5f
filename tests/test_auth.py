from __future__ import annotations

import hashlib
import hmac
from email.utils import parsedate_to_datetime

import pytest
from pydantic import ValidationError

from dealnews_sdk.auth import Authenticator, http_date
from dealnews_sdk.models import Credentials


@pytest.mark.parametrize(
    ("path", "method", "timestamp"),
    [
        ("/features", "GET", "Sat, 17 Oct 2026 10:00:00 GMT"),
        ("/login", "POST", "whatever"),
        ("", "GET", ""),
    ],
)
def test_public_auth_ignores_request(path: str, method: str, timestamp: str) -> None:
    auth = Authenticator("foo")

    assert auth.compute_auth_header(path, method, timestamp) == "DN foo"


def test_private_auth_signs_method_path_and_date() -> None:
    auth = Authenticator("foo", "bar")
    date = http_date()

    header = auth.compute_auth_header("/features", "GET", date)

    expected = hmac.new(b"bar", f"GET\n/features\n{date}".encode(), hashlib.sha1).hexdigest()
    assert header == "DN foo:" + expected


def test_private_auth_is_reproducible() -> None:
    auth = Authenticator("foo", "bar")
    date = "Sat, 17 Oct 2026 10:00:00 GMT"

    first = auth.compute_auth_header("/features", "GET", date)
    second = auth.compute_auth_header("/features", "GET", date)

    assert first == second
    assert first != auth.compute_auth_header("/features", "POST", date)
    assert first != auth.compute_auth_header("/features", "GET", "Sun, 18 Oct 2026 10:00:00 GMT")


def test_credentials_are_immutable() -> None:
    auth = Authenticator("foo", "bar")

    with pytest.raises(ValidationError):
        auth.credentials.secret_key = "other"  # type: ignore[misc]
    assert Credentials(public_key="foo").is_public_only
    assert not auth.credentials.is_public_only


def test_http_date_is_parseable_gmt() -> None:
    value = http_date()

    assert value.endswith("GMT")
    assert parsedate_to_datetime(value).utcoffset() is not None
