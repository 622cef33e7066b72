"""Entity pairing check for MarkdownV2 output.

Telegram pairs ``*``, ``_``, ``~`` and ``|`` into entities; an odd number of
unescaped occurrences makes the whole message unparseable. Code spans are
skipped because their content is never parsed as markup.
"""

from .escaping import PAIRED_MARKERS


def _skip_code(text: str, i: int, fence: str) -> int:
    """Return the index just past the closing ``fence`` (or end of text)."""
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text.startswith(fence, i):
            return i + len(fence)
        i += 1
    return len(text)


def unpaired_markers(text: str) -> list[str]:
    """List the paired markers whose unescaped count in ``text`` is odd."""
    counts = dict.fromkeys(PAIRED_MARKERS, 0)
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "`":
            fence = "```" if text.startswith("```", i) else "`"
            i = _skip_code(text, i + len(fence), fence)
            continue
        if ch in counts:
            counts[ch] += 1
        i += 1
    return [marker for marker in PAIRED_MARKERS if counts[marker] % 2]


def is_balanced(text: str) -> bool:
    return not unpaired_markers(text)
