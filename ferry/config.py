"""Ferry configuration management."""

import logging

from pydantic_settings import BaseSettings
from pydantic import Field


class FerrySettings(BaseSettings):
    """Settings loaded from environment variables or .env file."""

    # Diagnostics
    debug: bool = Field(default=False, description="Trace every slice conversion")
    log_level: str = Field(default="INFO", description="Log level for the CLI")

    # Mention rendering: non-ASCII so Telegram never sees a real mention
    mention_marker: str = Field(default="＠", description="Prefix for user/role/broadcast mentions")
    channel_marker: str = Field(default="＃", description="Prefix for channel mentions")

    model_config = {"env_prefix": "FERRY_", "env_file": ".env", "extra": "ignore"}


def load_settings() -> FerrySettings:
    """Load settings from environment."""
    settings = FerrySettings()

    logger = logging.getLogger("ferry.config")
    for name in ("mention_marker", "channel_marker"):
        marker = getattr(settings, name)
        if marker.isascii():
            logger.warning(
                "⚠️ %s=%r is ASCII, converted mentions may notify real "
                "Telegram users or be parsed as markup.",
                name.upper(), marker,
            )

    return settings
