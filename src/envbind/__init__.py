"""Populate dataclass and pydantic model fields from environment variables."""

from envbind.config.logging import configure_logging
from envbind.config.models import BindOptions
from envbind.config.settings import EnvbindSettings
from envbind.domain.tags import Env, env_field
from envbind.domain.types import Int32, Int64, UInt32, UInt64
from envbind.errors import (
    BindError,
    ConversionFailure,
    EnvVarRequired,
    FieldNotSettable,
    NotARecordReference,
    UnsupportedType,
)
from envbind.services.binder import Outcome, bind, try_bind
from envbind.services.result import BindErrorInfo, BindResult

__version__ = "0.1.0"

__all__ = [
    "BindError",
    "BindErrorInfo",
    "BindOptions",
    "BindResult",
    "ConversionFailure",
    "Env",
    "EnvVarRequired",
    "EnvbindSettings",
    "FieldNotSettable",
    "Int32",
    "Int64",
    "NotARecordReference",
    "Outcome",
    "UInt32",
    "UInt64",
    "UnsupportedType",
    "bind",
    "configure_logging",
    "env_field",
    "try_bind",
]
