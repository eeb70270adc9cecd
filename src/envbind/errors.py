"""Exceptions raised by :func:`envbind.bind`.

Every failure is a :class:`BindError`. ``code`` and :meth:`BindError.detail`
feed the structured :class:`~envbind.services.result.BindErrorInfo` returned
by :func:`envbind.try_bind`.
"""

from __future__ import annotations

from typing import Any, ClassVar


class BindError(Exception):
    """Base class for all binding failures."""

    code: ClassVar[str] = "BIND_ERROR"

    def detail(self) -> dict[str, Any]:
        return {}


class NotARecordReference(BindError, TypeError):
    """The binding target is not a dataclass or pydantic model instance."""

    code = "NOT_A_RECORD"

    def __init__(self, target_type: str) -> None:
        self.target_type = target_type
        super().__init__(f"expected a dataclass or pydantic model instance, got {target_type}")

    def detail(self) -> dict[str, Any]:
        return {"target_type": self.target_type}


class FieldNotSettable(BindError):
    """A tagged field cannot be written (private, or on a frozen record)."""

    code = "FIELD_NOT_SETTABLE"

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"can't set field {field_name}")

    def detail(self) -> dict[str, Any]:
        return {"field": self.field_name}


class UnsupportedType(BindError, TypeError):
    """A tagged field's annotation is outside the supported set."""

    code = "UNSUPPORTED_TYPE"

    def __init__(self, type_descriptor: str, field_name: str | None = None) -> None:
        self.type_descriptor = type_descriptor
        self.field_name = field_name
        msg = f"unsupported type {type_descriptor}"
        if field_name:
            msg = f"{msg} for field {field_name}"
        super().__init__(msg)

    def detail(self) -> dict[str, Any]:
        return {"type": self.type_descriptor, "field": self.field_name}


class EnvVarRequired(BindError):
    """A ``required`` variable is absent or empty."""

    code = "ENV_VAR_REQUIRED"

    def __init__(self, name: str, field_name: str | None = None) -> None:
        self.name = name
        self.field_name = field_name
        super().__init__(f"{name} is required")

    def detail(self) -> dict[str, Any]:
        return {"name": self.name, "field": self.field_name}


class ConversionFailure(BindError, ValueError):
    """The source string could not be parsed into the field's type.

    The underlying parse error is available as ``cause`` and is also chained
    as ``__cause__``.
    """

    code = "CONVERSION_FAILED"

    def __init__(
        self,
        field_name: str,
        env_name: str,
        raw_value: str,
        target_type: str,
        cause: Exception,
    ) -> None:
        self.field_name = field_name
        self.env_name = env_name
        self.raw_value = raw_value
        self.target_type = target_type
        self.cause = cause
        super().__init__(
            f"cannot convert {env_name}={raw_value!r} to {target_type} "
            f"for field {field_name}: {cause}"
        )

    def detail(self) -> dict[str, Any]:
        return {
            "field": self.field_name,
            "name": self.env_name,
            "raw_value": self.raw_value,
            "target_type": self.target_type,
            "cause": str(self.cause),
        }
