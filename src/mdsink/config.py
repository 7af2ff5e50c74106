"""Settings for mdsink.

Uses pydantic-settings so defaults can be overridden from ``MDSINK_*``
environment variables or a ``.env`` file. Escaping rules are fixed and are
not settings.
"""

import codecs
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MdsinkSettings(BaseSettings):
    """Output defaults for documents and builders."""

    model_config = SettingsConfigDict(
        env_prefix="MDSINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Text encoding of the bytes written to the stream
    encoding: str = "utf-8"

    # Marker used by bullet_list() when no bullet is given
    bullet: Literal["-", "*", "+"] = "-"

    # Fence character used by code_block() when none is given
    fence_char: Literal["`", "~"] = "`"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {value}") from e
        return value


@lru_cache(maxsize=1)
def get_settings() -> MdsinkSettings:
    """Get cached MdsinkSettings instance."""
    return MdsinkSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache. Useful for testing."""
    get_settings.cache_clear()
