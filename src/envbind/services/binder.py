"""Bind environment variables onto record fields.

For each field carrying a key-name attribute, in declaration order:

1. A present, non-empty variable always wins.
2. Otherwise a ``required`` field fails, whatever its default.
3. Otherwise a default (other than ``-``) is used.
4. Otherwise the field receives its type's zero value.

INVARIANT: the first failure stops the pass. Fields bound before it keep
their new values; nothing is rolled back.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from envbind.config.models import DEFAULT_OPTIONS, BindOptions
from envbind.domain.conversion import convert
from envbind.domain.records import RecordField, assign, is_record, record_fields
from envbind.domain.tags import describe_field, has_default, is_skipped, read_tag
from envbind.domain.types import describe_annotation, resolve_field_type
from envbind.errors import (
    BindError,
    ConversionFailure,
    EnvVarRequired,
    FieldNotSettable,
    NotARecordReference,
    UnsupportedType,
)
from envbind.services.result import BindErrorInfo, BindResult

logger = logging.getLogger(__name__)


class Outcome(StrEnum):
    """Where a bound field's value came from."""

    ENVIRONMENT = "environment"
    DEFAULT = "default"
    ZERO = "zero"


def _bind_field(
    target: Any,
    field: RecordField,
    environ: Mapping[str, str],
    options: BindOptions,
) -> Outcome | None:
    """Resolve and write one field. Returns None when the field is untagged."""
    env_key, default = read_tag(field.metadata, field.markers, options)
    if is_skipped(env_key):
        logger.debug("Skipping untagged field %s", field.name)
        return None

    if not field.settable:
        raise FieldNotSettable(field.name)

    desc = describe_field(field.name, env_key, default, resolve_field_type(field.annotation))

    env_val = environ.get(desc.env_name) or ""
    if desc.required and not env_val:
        raise EnvVarRequired(desc.env_name, desc.name)

    if desc.field_type is None:
        raise UnsupportedType(describe_annotation(field.annotation), desc.name)

    use_default = not env_val and has_default(desc.default)
    source = desc.default if use_default else env_val

    try:
        value = convert(source, desc.field_type)
    except ValueError as exc:
        raise ConversionFailure(
            desc.name, desc.env_name, source, desc.field_type.describe(), exc
        ) from exc

    assign(target, desc.name, value)

    if env_val:
        outcome = Outcome.ENVIRONMENT
    elif use_default:
        outcome = Outcome.DEFAULT
    else:
        outcome = Outcome.ZERO
    logger.debug("Bound field %s from %s (%s)", desc.name, desc.env_name, outcome)
    return outcome


def _bind_fields(
    target: Any,
    environ: Mapping[str, str] | None,
    options: BindOptions | None,
    bound: dict[str, Outcome],
) -> None:
    if not is_record(target):
        raise NotARecordReference(type(target).__qualname__)

    env = os.environ if environ is None else environ
    opts = options or DEFAULT_OPTIONS

    for field in record_fields(target):
        outcome = _bind_field(target, field, env, opts)
        if outcome is not None:
            bound[field.name] = outcome

    logger.debug("Bound %d field(s) on %s", len(bound), type(target).__qualname__)


def bind(
    target: Any,
    environ: Mapping[str, str] | None = None,
    *,
    options: BindOptions | None = None,
) -> None:
    """Populate *target*'s tagged fields from the environment, in place.

    Args:
        target: A dataclass or pydantic model instance.
        environ: Variable lookup table; defaults to ``os.environ`` read at
            call time. Never mutated.
        options: Metadata attribute names; defaults to ``env`` / ``default``.

    Raises:
        NotARecordReference: *target* is not a record instance.
        FieldNotSettable: A tagged field is private or frozen.
        EnvVarRequired: A required variable is absent or empty.
        UnsupportedType: A tagged field's type cannot be bound.
        ConversionFailure: A value could not be parsed.
    """
    _bind_fields(target, environ, options, {})


def try_bind(
    target: Any,
    environ: Mapping[str, str] | None = None,
    *,
    options: BindOptions | None = None,
) -> BindResult:
    """Like :func:`bind`, but report failure as a :class:`BindResult`."""
    bound: dict[str, Outcome] = {}
    try:
        _bind_fields(target, environ, options, bound)
    except BindError as exc:
        return BindResult(
            ok=False,
            data={"fields": dict(bound)},
            error=BindErrorInfo.from_exception(exc),
        )
    return BindResult(ok=True, data={"fields": bound})
