"""Field metadata: the ``Env`` marker, ``env_field()``, and key parsing.

A field's key-name attribute looks like one of::

    NAME
    NAME,required

The default-value attribute is an arbitrary string, with ``-`` meaning
"no default". Either attribute set to ``-`` is treated as absent.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import InitVar, dataclass
from typing import Any

from pydantic import BaseModel

from envbind.config.models import DEFAULT_OPTIONS, SKIP_SENTINEL, BindOptions
from envbind.domain.types import FieldType

REQUIRED_FLAG = "required"


@dataclass(frozen=True)
class Env:
    """``Annotated`` marker naming the environment variable for a field.

    Example::

        port: Annotated[str, Env("PORT", default="8000")] = ""
        name: Annotated[str, Env("NAME", required=True)] = ""
    """

    key: str
    default: str = ""
    required: InitVar[bool] = False

    def __post_init__(self, required: bool) -> None:
        if required and not is_skipped(self.key) and not parse_env_key(self.key)[1]:
            object.__setattr__(self, "key", f"{self.key},{REQUIRED_FLAG}")

    def as_metadata(self, options: BindOptions = DEFAULT_OPTIONS) -> dict[str, str]:
        return {options.tag_key: self.key, options.default_key: self.default}


def env_field(
    key: str,
    *,
    env_default: str = "",
    required: bool = False,
    **field_kwargs: Any,
) -> Any:
    """Build a dataclass ``field()`` whose metadata names an environment variable.

    *env_default* is the string used when the variable is unset; the usual
    ``default`` / ``default_factory`` keywords still set the pre-binding
    value of the attribute.
    """
    tag = Env(key, env_default, required=required)
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata.update(tag.as_metadata())
    return dataclasses.field(metadata=metadata, **field_kwargs)


def is_skipped(env_key: str | None) -> bool:
    return not env_key or env_key == SKIP_SENTINEL


def parse_env_key(env_key: str) -> tuple[str, bool]:
    """Split ``NAME[,required]`` into ``(name, required)``.

    Only the second segment is inspected; further segments are ignored.
    """
    parts = env_key.split(",")
    name = parts[0]
    required = len(parts) >= 2 and parts[1].strip() == REQUIRED_FLAG
    return name, required


def has_default(default: str) -> bool:
    return default != "" and default != SKIP_SENTINEL


class FieldDescriptor(BaseModel):
    """Everything the binder needs to know about one tagged field."""

    model_config = {"frozen": True}

    name: str
    env_key: str
    env_name: str
    required: bool = False
    default: str = ""
    field_type: FieldType | None = None


def read_tag(
    metadata: Mapping[str, Any],
    markers: tuple[Env, ...],
    options: BindOptions = DEFAULT_OPTIONS,
) -> tuple[str, str]:
    """Return ``(env_key, default)`` from a field's markers or metadata.

    An ``Env`` marker takes precedence over mapping metadata; the last
    marker wins when several are stacked.
    """
    if markers:
        marker = markers[-1]
        return marker.key, marker.default
    env_key = metadata.get(options.tag_key) or ""
    default = metadata.get(options.default_key) or ""
    return str(env_key), str(default)


def describe_field(
    name: str,
    env_key: str,
    default: str,
    field_type: FieldType | None,
) -> FieldDescriptor:
    env_name, required = parse_env_key(env_key)
    return FieldDescriptor(
        name=name,
        env_key=env_key,
        env_name=env_name,
        required=required,
        default=default,
        field_type=field_type,
    )
