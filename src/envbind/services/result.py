"""BindResult and BindErrorInfo: the non-raising binding contract.

:func:`envbind.try_bind` always returns a BindResult; :func:`envbind.bind`
raises the equivalent :class:`~envbind.errors.BindError` instead.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from envbind.errors import BindError


class BindErrorInfo(BaseModel):
    """Structured error payload within a BindResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: BindError) -> BindErrorInfo:
        return cls(code=exc.code, message=str(exc), detail=exc.detail())


class BindResult(BaseModel):
    """Outcome of one binding pass.

    Attributes:
        ok: Whether every tagged field was bound.
        op: Name of the operation (always ``"bind"``).
        data: ``{"fields": {field_name: outcome}}`` for each field bound
            before success or failure.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str = "bind"
    data: dict[str, Any] = Field(default_factory=dict)
    error: BindErrorInfo | None = None
