"""Shared building blocks for WordPress REST records."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, model_validator


class Rendered(BaseModel):
    """A ``{"rendered": "<html>"}`` wrapper as emitted by WordPress."""

    rendered: str = ""


def acf_or_empty(value: Any) -> Any:
    """WordPress sends ``false`` (or ``[]``) when a post has no ACF values."""
    if value is None or value is False or value == []:
        return {}
    return value


class AcfFields(BaseModel):
    """Base for fixed-schema ACF records.

    ACF reports unset fields as ``null`` or ``false``; those keys are dropped
    so the declared default applies.  Numbers typed into text fields (a
    ``year`` of ``2024``) are kept as strings.
    """

    class Config:
        coerce_numbers_to_str = True

    @model_validator(mode="before")
    @classmethod
    def drop_unset_values(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None and v is not False}
        return data
