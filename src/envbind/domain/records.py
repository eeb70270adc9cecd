"""Record introspection for dataclass and pydantic model instances.

Fields are enumerated in declaration order from the target's class on every
call; nothing is cached between calls.
"""

from __future__ import annotations

import dataclasses
import inspect
import sys
import types
import typing
from collections.abc import Mapping
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import BaseModel

from envbind.domain.tags import Env


@dataclasses.dataclass(frozen=True)
class RecordField:
    """One field of a binding target, as seen by the binder."""

    name: str
    annotation: Any
    metadata: Mapping[str, Any]
    markers: tuple[Env, ...]
    settable: bool


def is_record(target: object) -> bool:
    """True for dataclass instances and pydantic model instances (not classes)."""
    if isinstance(target, type):
        return False
    return dataclasses.is_dataclass(target) or isinstance(target, BaseModel)


def env_markers(annotation: Any) -> tuple[Env, ...]:
    """Collect ``Env`` markers from *annotation*.

    Markers are found on every ``Annotated`` layer and on the members of an
    ``Optional``/union, so ``Optional[Annotated[str, Env("A")]]`` is tagged.
    Outer markers come last.
    """
    found: list[Env] = []
    while get_origin(annotation) is Annotated:
        annotation, *extras = get_args(annotation)
        found[:0] = [extra for extra in extras if isinstance(extra, Env)]
    if get_origin(annotation) in (Union, types.UnionType):
        for arg in reversed(get_args(annotation)):
            found[:0] = env_markers(arg)
    return tuple(found)


def _is_private(name: str) -> bool:
    return name.startswith("_")


def _resolve_one(
    name: str,
    annotation: Any,
    globalns: dict[str, Any],
    localns: dict[str, Any],
) -> Any:
    holder = types.SimpleNamespace(__annotations__={name: annotation})
    try:
        return typing.get_type_hints(holder, globalns, localns, include_extras=True)[name]
    except NameError:
        # Names imported only under TYPE_CHECKING; the raw string stays.
        return annotation


def _field_hints(cls: type) -> dict[str, Any]:
    """Resolved field annotations for *cls*, one by one when some cannot resolve."""
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except NameError:
        pass
    names = {f.name for f in dataclasses.fields(cls)}
    hints: dict[str, Any] = {}
    for base in reversed(cls.__mro__):
        module = sys.modules.get(base.__module__)
        globalns = dict(vars(module)) if module is not None else {}
        localns = dict(vars(base))
        for name, annotation in inspect.get_annotations(base).items():
            if name in names:
                hints[name] = _resolve_one(name, annotation, globalns, localns)
    return hints


def _dataclass_fields(target: Any) -> list[RecordField]:
    cls = type(target)
    hints = _field_hints(cls)
    frozen = cls.__dataclass_params__.frozen
    fields: list[RecordField] = []
    for f in dataclasses.fields(target):
        annotation = hints.get(f.name, f.type)
        fields.append(
            RecordField(
                name=f.name,
                annotation=annotation,
                metadata=f.metadata,
                markers=env_markers(annotation),
                settable=not frozen and not _is_private(f.name),
            )
        )
    return fields


def _model_fields(target: BaseModel) -> list[RecordField]:
    cls = type(target)
    frozen = bool(cls.model_config.get("frozen", False))
    fields: list[RecordField] = []
    for name, info in cls.model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, Mapping) else {}
        markers = env_markers(info.annotation) + tuple(
            m for m in info.metadata if isinstance(m, Env)
        )
        fields.append(
            RecordField(
                name=name,
                annotation=info.annotation,
                metadata=extra,
                markers=markers,
                settable=not frozen and not info.frozen and not _is_private(name),
            )
        )
    return fields


def record_fields(target: Any) -> list[RecordField]:
    """Enumerate the fields of a record instance in declaration order."""
    if isinstance(target, BaseModel):
        return _model_fields(target)
    return _dataclass_fields(target)


def assign(target: Any, name: str, value: Any) -> None:
    setattr(target, name, value)
