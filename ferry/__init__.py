"""Ferry: Discord to Telegram message formatting."""

__version__ = "0.1.0"
