"""Discord markdown tokenizer.

Splits a Discord message into an ordered list of slices: plain text runs
and recognised markup constructs. Concatenating ``slice.raw`` over the
result always reproduces the input exactly.

All construct grammars are joined into one alternation, listed most
specific first. A single ``finditer`` pass then gives maximal-munch
behaviour: the earliest match wins, and of two matches starting at the
same offset the one listed first wins.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class SliceKind(str, Enum):
    PLAIN_TEXT = "plain_text"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"
    UNDERLINE = "underline"
    UNDERLINE_BOLD = "underline_bold"
    UNDERLINE_ITALIC = "underline_italic"
    UNDERLINE_BOLD_ITALIC = "underline_bold_italic"
    STRIKETHROUGH = "strikethrough"
    SPOILER = "spoiler"
    CODE_BLOCK = "code_block"
    INLINE_CODE = "inline_code"
    HEADING1 = "heading1"
    HEADING2 = "heading2"
    HEADING3 = "heading3"
    HEADING4 = "heading4"
    HEADING5 = "heading5"
    HEADING6 = "heading6"
    LINK = "link"
    USER_MENTION = "user_mention"
    ROLE_MENTION = "role_mention"
    CHANNEL_MENTION = "channel_mention"
    CUSTOM_EMOJI = "custom_emoji"
    BLOCK_QUOTE = "block_quote"
    MULTI_LINE_QUOTE = "multi_line_quote"
    EVERYONE_MENTION = "everyone_mention"
    HERE_MENTION = "here_mention"


@dataclass(frozen=True)
class Slice:
    """A typed span ``source[start:end]`` of a Discord message.

    ``captures`` holds the construct's inner groups, e.g. ``(text,)`` for
    bold or ``(language, body)`` for a code block. Optional groups that did
    not participate are ``None``.
    """

    kind: SliceKind
    start: int
    end: int
    raw: str
    captures: tuple[Optional[str], ...] = ()


# ============================================================
# GRAMMARS (priority order, most specific first)
# ============================================================
# Inner groups must stay unnamed; the outer named group is added when the
# alternation is built and identifies the kind.

_GRAMMARS: dict[SliceKind, str] = {
    # Code first: nothing inside a code span is markup
    SliceKind.CODE_BLOCK: r"```(?:(\w+)\n)?([\s\S]*?)```",
    SliceKind.INLINE_CODE: r"`([^`\n]+)`",

    # Combined styles before their parts
    SliceKind.UNDERLINE_BOLD_ITALIC: r"__\*\*\*(.+?)\*\*\*__",
    SliceKind.UNDERLINE_BOLD: r"__\*\*(.+?)\*\*__",
    SliceKind.UNDERLINE_ITALIC: r"__\*(.+?)\*__",
    SliceKind.BOLD_ITALIC: r"\*\*\*(.+?)\*\*\*",

    # Single styles
    SliceKind.BOLD: r"\*\*(.+?)\*\*",
    SliceKind.UNDERLINE: r"__(.+?)__",
    SliceKind.ITALIC: r"\*(.+?)\*",
    SliceKind.STRIKETHROUGH: r"~~(.+?)~~",
    SliceKind.SPOILER: r"\|\|(.+?)\|\|",

    # Headings, deepest level first
    SliceKind.HEADING6: r"^###### (.+)$",
    SliceKind.HEADING5: r"^##### (.+)$",
    SliceKind.HEADING4: r"^#### (.+)$",
    SliceKind.HEADING3: r"^### (.+)$",
    SliceKind.HEADING2: r"^## (.+)$",
    SliceKind.HEADING1: r"^# (.+)$",

    SliceKind.LINK: r"\[([^\]\n]+)\]\(([^)\s]+)\)",

    # References
    SliceKind.USER_MENTION: r"<@!?(\d+)>",
    SliceKind.ROLE_MENTION: r"<@&(\d+)>",
    SliceKind.CHANNEL_MENTION: r"<#(\d+)>",
    SliceKind.CUSTOM_EMOJI: r"<a?:(\w+):\d+>",

    # Quotes: ">>> " quotes everything to the end of the message
    SliceKind.MULTI_LINE_QUOTE: r"^>>> ([\s\S]+)",
    SliceKind.BLOCK_QUOTE: r"^> (.+)$",

    # Broadcasts last
    SliceKind.EVERYONE_MENTION: r"@everyone",
    SliceKind.HERE_MENTION: r"@here",
}

_GROUP_COUNTS = {kind: re.compile(pattern).groups for kind, pattern in _GRAMMARS.items()}

# Kinds that may appear inside a formatting span and are resolved there
REFERENCE_KINDS = (
    SliceKind.USER_MENTION,
    SliceKind.ROLE_MENTION,
    SliceKind.CHANNEL_MENTION,
    SliceKind.CUSTOM_EMOJI,
    SliceKind.EVERYONE_MENTION,
    SliceKind.HERE_MENTION,
)


def _build(kinds) -> re.Pattern:
    alternatives = [f"(?P<{kind.value}>{_GRAMMARS[kind]})" for kind in kinds]
    return re.compile("|".join(alternatives), re.MULTILINE)


MARKUP_RE = _build(_GRAMMARS)
REFERENCE_RE = _build(REFERENCE_KINDS)


def _to_slice(match: re.Match) -> Slice:
    # lastgroup is the outer named group: it closes after its inner groups
    kind = SliceKind(match.lastgroup)
    first = match.re.groupindex[match.lastgroup]
    captures = match.groups()[first:first + _GROUP_COUNTS[kind]]
    return Slice(kind, match.start(), match.end(), match.group(), captures)


def iter_constructs(text: str, pattern: re.Pattern = MARKUP_RE) -> Iterator[Slice]:
    """Yield the non-overlapping constructs in ``text``, left to right.

    Gaps between constructs are not yielded; see ``tokenize``.
    """
    for match in pattern.finditer(text):
        yield _to_slice(match)


def tokenize(source: str) -> list[Slice]:
    """Partition ``source`` into a gap-free, ordered list of slices.

    An empty source yields ``[]``; a source without markup yields a single
    PLAIN_TEXT slice covering it.
    """
    if not source:
        return []

    slices: list[Slice] = []
    pos = 0
    for construct in iter_constructs(source):
        if construct.start > pos:
            slices.append(_plain(source, pos, construct.start))
        slices.append(construct)
        pos = construct.end

    if pos < len(source):
        slices.append(_plain(source, pos, len(source)))

    return slices


def _plain(source: str, start: int, end: int) -> Slice:
    text = source[start:end]
    return Slice(SliceKind.PLAIN_TEXT, start, end, text, (text,))
