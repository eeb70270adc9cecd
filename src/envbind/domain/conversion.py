"""String → value conversion for each semantic type.

One parser and one zero value per :class:`SemanticType`. Parsers raise
``ValueError`` on malformed input; they are only ever called with a
non-empty source string.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from envbind.domain.types import FieldType, SemanticType

_SIGNED_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
_UNSIGNED_RE = re.compile(r"[0-9]+", re.ASCII)

_TRUE_LITERALS = frozenset({"1", "t", "true"})
_FALSE_LITERALS = frozenset({"0", "f", "false"})

INTEGER_RANGES: dict[SemanticType, tuple[int, int]] = {
    SemanticType.INT32: (-(2**31), 2**31 - 1),
    SemanticType.INT64: (-(2**63), 2**63 - 1),
    SemanticType.UINT32: (0, 2**32 - 1),
    SemanticType.UINT64: (0, 2**64 - 1),
}

ZERO_VALUES: dict[SemanticType, Any] = {
    SemanticType.TEXT: "",
    SemanticType.BOOL: False,
    SemanticType.INT32: 0,
    SemanticType.INT64: 0,
    SemanticType.UINT32: 0,
    SemanticType.UINT64: 0,
    SemanticType.BYTES: b"",
}


def parse_text(source: str) -> str:
    return source


def parse_bool(source: str) -> bool:
    """Parse ``1/t/true`` and ``0/f/false``, case-insensitively."""
    lowered = source.lower()
    if lowered in _TRUE_LITERALS:
        return True
    if lowered in _FALSE_LITERALS:
        return False
    msg = f"invalid boolean literal {source!r}"
    raise ValueError(msg)


def parse_bytes(source: str) -> bytes:
    """Raw bytes of *source*; undecodable bytes from ``os.environ`` survive."""
    return source.encode("utf-8", "surrogateescape")


def _integer_parser(kind: SemanticType) -> Callable[[str], int]:
    low, high = INTEGER_RANGES[kind]
    pattern = _UNSIGNED_RE if low == 0 else _SIGNED_RE

    def parse(source: str) -> int:
        if pattern.fullmatch(source) is None:
            msg = f"invalid {kind} literal {source!r}"
            raise ValueError(msg)
        value = int(source, 10)
        if not low <= value <= high:
            msg = f"{source!r} is out of range for {kind}"
            raise ValueError(msg)
        return value

    parse.__name__ = f"parse_{kind}"
    return parse


PARSERS: dict[SemanticType, Callable[[str], Any]] = {
    SemanticType.TEXT: parse_text,
    SemanticType.BOOL: parse_bool,
    SemanticType.INT32: _integer_parser(SemanticType.INT32),
    SemanticType.INT64: _integer_parser(SemanticType.INT64),
    SemanticType.UINT32: _integer_parser(SemanticType.UINT32),
    SemanticType.UINT64: _integer_parser(SemanticType.UINT64),
    SemanticType.BYTES: parse_bytes,
}


def zero_value(field_type: FieldType) -> Any:
    """Zero value for *field_type*; optional fields get the inner kind's zero."""
    return ZERO_VALUES[field_type.kind]


def convert(source: str, field_type: FieldType) -> Any:
    """Convert *source* into a value of *field_type*.

    An empty source yields the zero value. Optional types are converted
    exactly like their inner kind so the field never ends up ``None``.
    """
    if source == "":
        return zero_value(field_type)
    return PARSERS[field_type.kind](source)
