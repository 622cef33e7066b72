"""Slice → Telegram MarkdownV2 conversion.

Each slice kind has one handler. Delimiters are emitted verbatim; the
span content always goes through an escaper, so a handler can never leave
an unpaired marker or a bare reserved character behind.

  **x**          → *x*
  *x*            → _x_
  ***x***        → *_x_*
  __x__          → __x__
  __**x**__      → __*x*__
  __*x*__        → ___x___
  __***x***__    → *_\\_x\\__*    (no 4-way entity; the extra underline is literal)
  ~~x~~          → ~x~
  ||x||          → ||x||
  # / ## / ### x → *x*
  #### x …       → \\#\\#\\#\\# x
  > x            → >x
  >>> x          → **>x
"""

import logging
from typing import Callable, Mapping, Optional

from ..config import FerrySettings, load_settings
from .emoji_table import EMOJI_TABLE
from .escaping import escape_code, escape_plain, escape_url
from .references import ResolutionContext, resolve_emoji, resolve_inline_references, resolve_mention
from .slices import Slice, SliceKind, tokenize

logger = logging.getLogger("ferry.markup.converter")

Handler = Callable[[Slice, Optional[ResolutionContext]], str]

# Formatting spans: kind → (opening, closing) delimiters
_SPAN_DELIMITERS = {
    SliceKind.BOLD: ("*", "*"),
    SliceKind.ITALIC: ("_", "_"),
    SliceKind.BOLD_ITALIC: ("*_", "_*"),
    SliceKind.UNDERLINE: ("__", "__"),
    SliceKind.UNDERLINE_BOLD: ("__*", "*__"),
    SliceKind.UNDERLINE_ITALIC: ("___", "___"),
    SliceKind.UNDERLINE_BOLD_ITALIC: ("*_\\_", "\\__*"),
    SliceKind.STRIKETHROUGH: ("~", "~"),
    SliceKind.SPOILER: ("||", "||"),
    SliceKind.HEADING1: ("*", "*"),
    SliceKind.HEADING2: ("*", "*"),
    SliceKind.HEADING3: ("*", "*"),
}

_ESCAPED_HEADING_LEVELS = {
    SliceKind.HEADING4: 4,
    SliceKind.HEADING5: 5,
    SliceKind.HEADING6: 6,
}

_QUOTE_KINDS = (SliceKind.BLOCK_QUOTE, SliceKind.MULTI_LINE_QUOTE)

_MENTION_KINDS = (
    SliceKind.USER_MENTION,
    SliceKind.ROLE_MENTION,
    SliceKind.CHANNEL_MENTION,
    SliceKind.EVERYONE_MENTION,
    SliceKind.HERE_MENTION,
)


class SliceConverter:
    """Converts individual slices using explicit settings and emoji table."""

    def __init__(
        self,
        settings: Optional[FerrySettings] = None,
        emoji_table: Optional[Mapping[str, str]] = None,
    ):
        self.settings = settings or load_settings()
        self.emoji_table = EMOJI_TABLE if emoji_table is None else emoji_table

        self.handlers: dict[SliceKind, Handler] = {
            SliceKind.PLAIN_TEXT: self._plain,
            SliceKind.CODE_BLOCK: self._code_block,
            SliceKind.INLINE_CODE: self._inline_code,
            SliceKind.LINK: self._link,
            SliceKind.CUSTOM_EMOJI: self._custom_emoji,
            SliceKind.BLOCK_QUOTE: self._block_quote,
            SliceKind.MULTI_LINE_QUOTE: self._multi_line_quote,
        }
        for kind in _SPAN_DELIMITERS:
            self.handlers[kind] = self._span
        for kind in _ESCAPED_HEADING_LEVELS:
            self.handlers[kind] = self._escaped_heading
        for kind in _MENTION_KINDS:
            self.handlers[kind] = self._mention

    def convert(self, piece: Slice, context: Optional[ResolutionContext] = None) -> str:
        handler = self.handlers.get(piece.kind)
        if handler is None:
            logger.debug("Unknown slice kind %r, escaping as plain text", piece.kind)
            return escape_plain(piece.raw)
        return handler(piece, context)

    def escape_fmt(self, text: Optional[str], context: Optional[ResolutionContext] = None) -> str:
        """Escape span content, resolving any mentions/emoji inside it."""
        return resolve_inline_references(
            text, context,
            table=self.emoji_table,
            marker=self.settings.mention_marker,
            channel_marker=self.settings.channel_marker,
        )

    # ── Handlers ────────────────────────────────────────────

    def _plain(self, piece, context):
        return escape_plain(piece.raw)

    def _span(self, piece, context):
        opening, closing = _SPAN_DELIMITERS[piece.kind]
        content = self.escape_fmt(piece.captures[0], context)
        if not content:
            # Bare delimiters would read as a different entity, e.g. "__"
            return ""
        return f"{opening}{content}{closing}"

    def _escaped_heading(self, piece, context):
        hashes = "\\#" * _ESCAPED_HEADING_LEVELS[piece.kind]
        return f"{hashes} {escape_plain(piece.captures[0])}"

    def _code_block(self, piece, context):
        language, body = piece.captures
        if language:
            return f"```{language}\n{escape_code(body)}```"
        return f"```{escape_code(body)}```"

    def _inline_code(self, piece, context):
        return f"`{escape_code(piece.captures[0])}`"

    def _link(self, piece, context):
        label, url = piece.captures
        return f"[{self.escape_fmt(label, context)}]({escape_url(url)})"

    def _mention(self, piece, context):
        mention_id = piece.captures[0] if piece.captures else None
        return resolve_mention(
            piece.kind, mention_id, context,
            marker=self.settings.mention_marker,
            channel_marker=self.settings.channel_marker,
        )

    def _custom_emoji(self, piece, context):
        glyph = resolve_emoji(piece.captures[0], self.emoji_table)
        if glyph is None:
            logger.debug("No standard emoji for %r, dropping it", piece.captures[0])
        return escape_plain(glyph)

    def _block_quote(self, piece, context):
        return f">{self._quote_line(piece.captures[0], context)}"

    def _multi_line_quote(self, piece, context):
        # Every quoted line needs its own ">" to stay inside the quote
        lines = piece.captures[0].split("\n")
        return "**>" + "\n>".join(self._quote_line(line, context) for line in lines)

    def _quote_line(self, line, context):
        """Convert one quoted line; quote markers inside it stay literal."""
        parts = []
        for inner in tokenize(line):
            if inner.kind in _QUOTE_KINDS:
                parts.append(self.escape_fmt(inner.raw, context))
            else:
                parts.append(self.convert(inner, context))
        return "".join(parts)


def convert_slice(
    piece: Slice,
    context: Optional[ResolutionContext] = None,
    *,
    settings: Optional[FerrySettings] = None,
) -> str:
    """Convert a single slice. See ``SliceConverter``.

    Without explicit settings the default engine's converter is reused.
    """
    if settings is None:
        from .engine import default_engine
        return default_engine().converter.convert(piece, context)
    return SliceConverter(settings).convert(piece, context)
