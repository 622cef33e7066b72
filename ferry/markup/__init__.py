"""Markup sub-core: Discord markdown → Telegram MarkdownV2.

- Escaping: MarkdownV2 reserved-character escaping
- Slices: tokenizer splitting a message into typed slices
- References: mention and custom emoji resolution
- Converter: per-slice MarkdownV2 rendering
- Engine: tokenize → convert → join, with plain-escape fallback
- Validation: entity pairing check
"""

from .emoji_table import EMOJI_TABLE
from .escaping import escape_plain, escape_code, escape_url
from .slices import Slice, SliceKind, tokenize
from .references import ResolutionContext, resolve_mention, resolve_emoji, collect_references
from .converter import SliceConverter, convert_slice
from .engine import MarkupEngine, convert_all
from .validation import unpaired_markers, is_balanced

__all__ = [
    # Escaping
    "escape_plain",
    "escape_code",
    "escape_url",
    # Slices
    "Slice",
    "SliceKind",
    "tokenize",
    # References
    "EMOJI_TABLE",
    "ResolutionContext",
    "resolve_mention",
    "resolve_emoji",
    "collect_references",
    # Conversion
    "SliceConverter",
    "convert_slice",
    "MarkupEngine",
    "convert_all",
    # Validation
    "unpaired_markers",
    "is_balanced",
]
