"""Pydantic configuration models with code-baked defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field

SKIP_SENTINEL = "-"

# Metadata attribute names must be identifiers.
KEY_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]*$"


class BindOptions(BaseModel):
    """Names of the metadata attributes the binder reads.

    ``default_key="envdefault"`` reads records written against the older
    attribute spelling.
    """

    model_config = {"frozen": True}

    tag_key: str = Field(default="env", pattern=KEY_PATTERN)
    default_key: str = Field(default="default", pattern=KEY_PATTERN)


DEFAULT_OPTIONS = BindOptions()
