"""Per-request options for the DealNews client."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping, Union

from .exceptions import InvalidMethodOption, InvalidOption

logger = logging.getLogger(__name__)

# Request options we accept and the methods each one is supported in.
VALID_REQUEST_OPTIONS: Mapping[str, frozenset[str]] = {
    "form_params": frozenset({"POST"}),
    "format": frozenset({"GET", "POST"}),
    "headers": frozenset({"GET", "POST"}),
    "query": frozenset({"GET"}),
}


@dataclass(frozen=True)
class RequestOptions:
    format: str | None = None
    headers: Mapping[str, str] | None = None
    query: Mapping[str, Any] | None = None
    form_params: Mapping[str, Any] | None = None

    def as_dict(self) -> dict[str, Any]:
        """Only the options that were actually set."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


OptionsInput = Union[RequestOptions, Mapping[str, Any], None]


def coerce_options(options: OptionsInput) -> dict[str, Any]:
    if options is None:
        return {}
    if isinstance(options, RequestOptions):
        return options.as_dict()
    return dict(options)


def validate_options(method: str, options: Mapping[str, Any]) -> None:
    """Check every supplied option against the method before anything is built."""
    for option in options:
        allowed = VALID_REQUEST_OPTIONS.get(option)
        if allowed is None:
            logger.debug("Rejected unknown request option %r", option)
            raise InvalidOption(option)
        if method not in allowed:
            logger.debug("Rejected request option %r for %s", option, method)
            raise InvalidMethodOption(option, method)
