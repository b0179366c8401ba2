"""
Shell configuration.

Defaults suit an interactive session; every value can be overridden from
the environment or from command line options.

Environment Variables:
    TREESHELL_USER - name of the user folder created under /home
    TREESHELL_LOG_LEVEL - logging level name (DEBUG, INFO, WARNING, ...)
"""

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, field_validator

from treeshell.commands import MAX_NAME_LENGTH
from treeshell.core.context import DEFAULT_USER

ENV_PREFIX = "TREESHELL_"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ShellConfig(BaseModel):
    """Settings for one interactive session."""

    user: str = Field(
        default=DEFAULT_USER,
        min_length=1,
        max_length=MAX_NAME_LENGTH,
        description="Name of the user folder the session starts in (/home/<user>)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Minimum level of log records written to stderr",
    )

    @field_validator("user")
    @classmethod
    def _user_is_addressable(cls, value: str) -> str:
        # The command language only reads unquoted names made of letters
        if not value.isalpha():
            raise ValueError("user name must contain letters only")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides: str | None
    ) -> "ShellConfig":
        """
        Build a configuration from environment variables and explicit overrides.

        Params:
            environ: Mapping to read from; os.environ when omitted
            overrides: Field values that win over the environment; None is ignored

        Returns:
            Validated configuration

        Raises:
            pydantic.ValidationError: If a value is invalid
        """
        environ = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for field_name in cls.model_fields:
            env_value = environ.get(ENV_PREFIX + field_name.upper())
            if env_value is not None:
                values[field_name] = env_value
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
