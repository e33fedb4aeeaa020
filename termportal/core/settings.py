# termportal/core/settings.py

"""
Configuration settings for termportal using Pydantic models.

Settings come from three places, later ones winning: the model defaults,
TERMPORTAL_* environment variables, and explicit overrides (usually the
command line). Anything invalid is reported as a ConfigurationError naming
the offending field.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import ConfigurationError

logger = logging.getLogger("termportal")

ENV_PREFIX = "TERMPORTAL_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PortalSettings(BaseModel):
    """Settings for one portal session."""
    model_config = ConfigDict(frozen=True)

    board_width: int = Field(default=60, ge=3)
    board_height: int = Field(default=25, ge=1)
    tick_ms: int = Field(default=120, gt=0)
    content: Literal["projects", "servers"] = "projects"
    show_banner: bool = True
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and make sure logging knows it."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ConfigurationError(
                f"must be one of {', '.join(LOG_LEVELS)}, got {v!r}", field="log_level"
            )
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def validate_log_file(cls, v: Any) -> Any:
        """An empty path means no log file."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None, **overrides: Any) -> "PortalSettings":
        """
        Build settings from TERMPORTAL_* variables plus explicit overrides.

        Overrides set to None are ignored so argparse defaults do not mask
        environment values.
        """
        environ = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for name in cls.model_fields:
            env_name = f"{ENV_PREFIX}{name.upper()}"
            if env_name in environ:
                values[name] = environ[env_name]
        values.update({k: v for k, v in overrides.items() if v is not None})
        return load_settings(**values)


def load_settings(**values: Any) -> PortalSettings:
    """Validate values into PortalSettings, raising ConfigurationError on failure."""
    try:
        return PortalSettings(**values)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error.get("loc", ())) or None
        raise ConfigurationError(error.get("msg", str(e)), field=field) from e


def configure_logging(settings: PortalSettings) -> None:
    """
    Attach handlers to the package logger.

    curses owns the terminal while a session runs, so records only go to a
    file when one is configured and are dropped otherwise.
    """
    package_logger = logging.getLogger("termportal")
    package_logger.setLevel(settings.log_level)
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
        old.close()
    if settings.log_file:
        try:
            handler: logging.Handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"cannot open log file: {e}", field="log_file") from e
        handler.setFormatter(logging.Formatter("%(levelname)s:     %(name)s - %(message)s"))
    else:
        handler = logging.NullHandler()
    package_logger.addHandler(handler)
    package_logger.propagate = False
    logger.debug(f"Logging configured at {settings.log_level}")
