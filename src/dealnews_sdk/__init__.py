"""Python client for the DealNews API."""

from .auth import Authenticator, http_date
from .client import DealNewsClient
from .config import ClientConfig
from .dispatcher import ACCEPTED_FORMATS, RequestDispatcher
from .exceptions import (
    DealNewsError,
    DealNewsValidationError,
    InvalidMethodOption,
    InvalidOption,
)
from .models import Credentials, NormalizedResponse
from .request_options import VALID_REQUEST_OPTIONS, RequestOptions
from .transport import HttpxTransport, Transport
from .version import __version__

__all__ = [
    "ACCEPTED_FORMATS",
    "Authenticator",
    "ClientConfig",
    "Credentials",
    "DealNewsClient",
    "DealNewsError",
    "DealNewsValidationError",
    "HttpxTransport",
    "InvalidMethodOption",
    "InvalidOption",
    "NormalizedResponse",
    "RequestDispatcher",
    "RequestOptions",
    "Transport",
    "VALID_REQUEST_OPTIONS",
    "__version__",
    "http_date",
]
