"""Discord → Telegram MarkdownV2 conversion engine.

Tokenizes a Discord message, converts every slice and joins the results.
Conversion never raises: if anything goes wrong the whole message is sent
through plain escaping instead, which Telegram always accepts.
"""

import logging
from functools import lru_cache
from typing import Mapping, Optional

from ..config import FerrySettings, load_settings
from .converter import SliceConverter
from .escaping import escape_plain
from .references import ResolutionContext
from .slices import Slice, tokenize
from .validation import unpaired_markers

logger = logging.getLogger("ferry.markup.engine")


class MarkupEngine:
    """Stateless converter; one instance can serve any number of threads."""

    def __init__(
        self,
        settings: Optional[FerrySettings] = None,
        emoji_table: Optional[Mapping[str, str]] = None,
    ):
        self.settings = settings or load_settings()
        self.converter = SliceConverter(self.settings, emoji_table)

    def tokenize(self, source: str) -> list[Slice]:
        return tokenize(source)

    def convert(self, source: Optional[str], context: Optional[ResolutionContext] = None) -> str:
        """Convert Discord markdown to Telegram MarkdownV2.

        Args:
            source: Discord message text (may be empty)
            context: Optional id → name tables for mentions

        Returns:
            MarkdownV2 text safe to send with ``parse_mode="MarkdownV2"``.
        """
        if not source:
            return ""

        debug = self.settings.debug
        try:
            slices = self.tokenize(source)
            if debug:
                logger.debug("Parsed %d slices from %r", len(slices), source)

            parts = []
            for index, piece in enumerate(slices):
                converted = self.converter.convert(piece, context)
                if debug:
                    logger.debug("Slice %d [%s] %r -> %r", index, getattr(piece.kind, "value", piece.kind), piece.raw, converted)
                parts.append(converted)
            result = "".join(parts)
        except Exception:
            logger.exception("Slice conversion failed, falling back to plain escaping")
            return escape_plain(source)

        if debug:
            unpaired = unpaired_markers(result)
            if unpaired:
                logger.warning("Unpaired MarkdownV2 markers %s in %r", unpaired, result)
            logger.debug("Conversion result: %r", result)

        return result


@lru_cache(maxsize=1)
def default_engine() -> MarkupEngine:
    """Engine built from environment settings, created on first use."""
    return MarkupEngine(load_settings())


def convert_all(source: Optional[str], context: Optional[ResolutionContext] = None) -> str:
    """Convert Discord markdown to Telegram MarkdownV2 with the default engine."""
    return default_engine().convert(source, context)
