"""Engine configuration: which dialect to use and whether to report it.

Values come from the environment (optionally seeded from a ``.env`` file at
the project root):

  TEXT_TABLES_MODE         org | markdown | restructuredtext  (default restructuredtext)
  TEXT_TABLES_SHOW_STATUS  true | false                       (default true)
"""

import logging
import os
from enum import Enum
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

logger = logging.getLogger(__name__)

ROOT = Path(__file__).parent.parent.parent.resolve()

MODE_ENV = "TEXT_TABLES_MODE"
SHOW_STATUS_ENV = "TEXT_TABLES_SHOW_STATUS"


class Mode(str, Enum):
    """Supported table dialects."""

    ORG = "org"
    MARKDOWN = "markdown"
    RESTRUCTUREDTEXT = "restructuredtext"


class Configuration(BaseModel):
    """Resolved engine settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: Mode = Mode.RESTRUCTUREDTEXT
    show_status: bool = True

    @field_validator("mode", mode="before")
    @classmethod
    def normalize_mode(cls, value):
        """Accept mode names in any case and with surrounding whitespace."""
        if isinstance(value, str):
            return value.strip().lower()
        return value


def build(env_file: Path | None = None) -> Configuration:
    """Read the configuration from the environment.

    Invalid values are logged and replaced by their defaults so a bad
    setting never stops the engine.
    """
    load_dotenv(env_file or ROOT / ".env")

    values = {}
    mode = os.getenv(MODE_ENV, "")
    if mode:
        values["mode"] = mode
    show_status = os.getenv(SHOW_STATUS_ENV, "")
    if show_status:
        values["show_status"] = show_status

    config = Configuration()
    for key, value in values.items():
        try:
            config = override(config, **{key: value})
        except ValidationError:
            logger.warning("Ignoring invalid %s=%r, using %r", key, value, getattr(config, key))
    logger.debug("Configuration: mode=%s show_status=%s", config.mode.value, config.show_status)
    return config


def override(config: Configuration, **overrides) -> Configuration:
    """Return a validated copy of *config* with *overrides* applied."""
    unknown = set(overrides) - set(Configuration.model_fields)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
    return Configuration.model_validate({**config.model_dump(), **overrides})
