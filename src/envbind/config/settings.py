"""Library settings read from ``ENVBIND_*`` environment variables.

Priority chain (highest to lowest):
  1. Init kwargs:   values passed by the caller
  2. Env vars:      ``ENVBIND_*`` prefix
  3. Code defaults: baked into this model and :class:`BindOptions`
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from envbind.config.models import KEY_PATTERN, BindOptions


class EnvbindSettings(BaseSettings):
    """Settings for the binder itself, separate from the records it binds.

    Attributes:
        verbose: Emit DEBUG records from the ``envbind`` logger.
        log_json: Render log records as JSON lines.
        tag_key: Metadata attribute holding the variable name.
        default_key: Metadata attribute holding the default value.
    """

    model_config = SettingsConfigDict(frozen=True, env_prefix="ENVBIND_")

    verbose: bool = False
    log_json: bool = False
    tag_key: str = Field(default="env", pattern=KEY_PATTERN)
    default_key: str = Field(default="default", pattern=KEY_PATTERN)

    def bind_options(self) -> BindOptions:
        return BindOptions(tag_key=self.tag_key, default_key=self.default_key)

    def configure_logging(self) -> None:
        from envbind.config.logging import configure_logging

        configure_logging(verbose=self.verbose, log_json=self.log_json)
