"""MarkdownV2 escaping.

Telegram rejects a MarkdownV2 message outright if any reserved character
appears unescaped outside an entity, so every plain run of text passes
through here before it is emitted.

Escape contexts:
  - plain text:   _ * [ ] ( ) ~ ` > # + - = | { } . ! and backslash
  - code / pre:   ` and backslash only
  - link target:  ) and backslash, plus the paired markers * _ ~ |
"""

import re
from typing import Optional

from telegram.helpers import escape_markdown

RESERVED_CHARS = r"\_*[]()~`>#+-=|{}.!"

# Entity markers Telegram pairs up; an odd unescaped count breaks parsing
PAIRED_MARKERS = "*_~|"

_PAIRED_MARKER_RE = re.compile(f"([{re.escape(PAIRED_MARKERS)}])")


def escape_plain(text: Optional[str]) -> str:
    """Escape every MarkdownV2 reserved character in ``text``."""
    if not text:
        return ""
    return escape_markdown(text, version=2)


def escape_code(text: Optional[str]) -> str:
    """Escape the body of an inline code span or fenced code block."""
    if not text:
        return ""
    return escape_markdown(text, version=2, entity_type="code")


def escape_url(text: Optional[str]) -> str:
    """Escape a link target inside ``(...)``.

    Telegram only requires ``)`` and ``\\`` here, but any ASCII character
    may be escaped, so the paired markers are escaped too and never count
    towards an unbalanced entity.
    """
    if not text:
        return ""
    text = escape_markdown(text, version=2, entity_type="text_link")
    return _PAIRED_MARKER_RE.sub(r"\\\1", text)
