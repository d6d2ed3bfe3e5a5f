"""Typed credential and response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DealNewsModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Credentials(DealNewsModel):
    public_key: str
    secret_key: str = ""

    @property
    def is_public_only(self) -> bool:
        return not self.secret_key


class NormalizedResponse(DealNewsModel):
    """Status, headers and raw body of an API response.

    Headers map each name to every value received for it, in order. The body
    is left undecoded; interpreting JSON, XML or RSS is up to the caller.
    Item access (``response["status"]``) is supported alongside attributes.
    """

    status: int
    headers: dict[str, list[str]] = Field(default_factory=dict)
    body: bytes = b""

    def __getitem__(self, key: str) -> Any:
        if key not in type(self).model_fields:
            raise KeyError(key)
        return getattr(self, key)

