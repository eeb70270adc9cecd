"""Semantic field types and annotation resolution.

The set of bindable types is closed: every annotation either resolves to
one of the :class:`SemanticType` kinds (optionally wrapped in ``Optional``)
or is unsupported.
"""

from __future__ import annotations

import types
from enum import StrEnum
from typing import Annotated, Any, NewType, Union, get_args, get_origin

from pydantic import BaseModel

Int32 = NewType("Int32", int)
Int64 = NewType("Int64", int)
UInt32 = NewType("UInt32", int)
UInt64 = NewType("UInt64", int)


class SemanticType(StrEnum):
    """Kinds of value the binder knows how to parse."""

    TEXT = "text"
    BOOL = "bool"
    INT32 = "int32"
    INT64 = "int64"
    UINT32 = "uint32"
    UINT64 = "uint64"
    BYTES = "bytes"


ANNOTATION_KINDS: dict[Any, SemanticType] = {
    str: SemanticType.TEXT,
    bool: SemanticType.BOOL,
    int: SemanticType.INT64,
    Int32: SemanticType.INT32,
    Int64: SemanticType.INT64,
    UInt32: SemanticType.UINT32,
    UInt64: SemanticType.UINT64,
    bytes: SemanticType.BYTES,
}


class FieldType(BaseModel):
    """A resolved field type: a semantic kind, possibly optional."""

    model_config = {"frozen": True}

    kind: SemanticType
    optional: bool = False

    def describe(self) -> str:
        if self.optional:
            return f"Optional[{self.kind}]"
        return str(self.kind)


def strip_annotated(annotation: Any) -> Any:
    """Remove any number of ``Annotated[...]`` layers."""
    while get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    return annotation


def _optional_inner(annotation: Any) -> Any | None:
    """Return ``T`` for ``Optional[T]`` / ``T | None``, else None."""
    if get_origin(annotation) not in (Union, types.UnionType):
        return None
    args = [arg for arg in get_args(annotation) if arg is not type(None)]
    if len(args) != 1 or len(args) == len(get_args(annotation)):
        return None
    return strip_annotated(args[0])


def _kind_of(annotation: Any) -> SemanticType | None:
    try:
        return ANNOTATION_KINDS.get(annotation)
    except TypeError:
        # Unhashable annotations (e.g. some typing special forms) are never bindable.
        return None


def resolve_field_type(annotation: Any) -> FieldType | None:
    """Map a field annotation onto a :class:`FieldType`.

    Returns None when the annotation is outside the supported set, including
    nested optionals and unions of two concrete types.
    """
    annotation = strip_annotated(annotation)

    kind = _kind_of(annotation)
    if kind is not None:
        return FieldType(kind=kind)

    inner = _optional_inner(annotation)
    if inner is None:
        return None
    kind = _kind_of(inner)
    if kind is None:
        return None
    return FieldType(kind=kind, optional=True)


def describe_annotation(annotation: Any) -> str:
    """Human-readable rendering of an arbitrary annotation for error messages."""
    annotation = strip_annotated(annotation)
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type) and get_origin(annotation) is None:
        return annotation.__qualname__
    if isinstance(annotation, NewType):
        return annotation.__name__
    return repr(annotation).replace("typing.", "")
