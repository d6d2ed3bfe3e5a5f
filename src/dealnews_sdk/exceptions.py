"""SDK-specific exceptions."""

from __future__ import annotations


class DealNewsError(Exception):
    """Base exception for all DealNews SDK failures."""


class DealNewsValidationError(DealNewsError):
    """Raised when client configuration or request input is invalid."""


class InvalidOption(DealNewsValidationError):
    """Raised when a request option key is not recognized."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Invalid option {option}")
        self.option = option


class InvalidMethodOption(DealNewsValidationError):
    """Raised when a recognized option is not supported by the request method."""

    def __init__(self, option: str, method: str) -> None:
        super().__init__(f"Invalid option {option} for method {method}")
        self.option = option
        self.method = method
