"""Message rendering configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MessageSettings(BaseSettings):
    """Limits applied when values are stringified into error messages.

    Loads from environment variables automatically:
        ARGCHECK_MAX_TEXT_WIDTH, ARGCHECK_MAX_ELEMENTS

    Attributes
    ----------
    max_text_width
        Strings (and the text form of other objects) longer than this are
        cut and suffixed with ``"..."``.
    max_elements
        Maximum number of elements shown for collections and mappings.
    """

    max_text_width: int = Field(default=40, ge=4, description="Max width of stringified values")
    max_elements: int = Field(default=10, ge=1, description="Max collection elements shown")

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="ARGCHECK_",
    )


@lru_cache(maxsize=None)
def get_settings() -> MessageSettings:
    """Return the process-wide settings, read once from the environment."""
    return MessageSettings()


def reset_settings() -> None:
    """Forget cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
