"""Mention and custom emoji resolution.

Discord references (``<@id>``, ``<@&id>``, ``<#id>``, ``<:name:id>``,
``@everyone``, ``@here``) have no Telegram equivalent. Mentions become
display names behind a non-ASCII marker so the forwarded text can never
ping anyone on Telegram; custom emoji become standard glyphs or vanish.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .emoji_table import EMOJI_TABLE
from .escaping import escape_plain
from .slices import REFERENCE_RE, SliceKind, iter_constructs

logger = logging.getLogger("ferry.markup.references")

DEFAULT_MENTION_MARKER = "＠"
DEFAULT_CHANNEL_MARKER = "＃"

# Shortest key allowed to match inside a longer emoji name
MIN_SUBSTRING_KEY = 4

_SYNTHETIC_PREFIX = {
    SliceKind.USER_MENTION: "User",
    SliceKind.ROLE_MENTION: "Role",
    SliceKind.CHANNEL_MENTION: "Channel",
}

_BROADCAST_WORDS = {
    SliceKind.EVERYONE_MENTION: "everyone",
    SliceKind.HERE_MENTION: "here",
}


def _frozen(mapping: Optional[Mapping[Any, Any]]) -> Mapping[str, str]:
    # Missing names (None) are left out so the synthetic fallback applies
    return MappingProxyType({
        str(k): str(v) for k, v in (mapping or {}).items() if v is not None
    })


@dataclass(frozen=True)
class ResolutionContext:
    """Id → name tables for one message. Ids may be given as int or str."""

    users: Mapping[str, str] = field(default_factory=dict)
    roles: Mapping[str, str] = field(default_factory=dict)
    channels: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "users", _frozen(self.users))
        object.__setattr__(self, "roles", _frozen(self.roles))
        object.__setattr__(self, "channels", _frozen(self.channels))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResolutionContext":
        """Build a context from ``{"users": {...}, "roles": {...}, "channels": {...}}``.

        Missing sections are treated as empty.
        """
        if not isinstance(data, Mapping):
            raise ValueError("resolution context must be a mapping")
        sections = {}
        for name in ("users", "roles", "channels"):
            section = data.get(name) or {}
            if not isinstance(section, Mapping):
                raise ValueError(f"'{name}' must map ids to names")
            sections[name] = section
        return cls(**sections)

    def lookup(self, kind: SliceKind, mention_id: str) -> Optional[str]:
        table = {
            SliceKind.USER_MENTION: self.users,
            SliceKind.ROLE_MENTION: self.roles,
            SliceKind.CHANNEL_MENTION: self.channels,
        }.get(kind)
        if table is None:
            return None
        return table.get(str(mention_id))


def resolve_mention(
    kind: SliceKind,
    mention_id: Optional[str] = None,
    context: Optional[ResolutionContext] = None,
    *,
    marker: str = DEFAULT_MENTION_MARKER,
    channel_marker: str = DEFAULT_CHANNEL_MARKER,
) -> str:
    """Render a mention as escaped MarkdownV2 display text.

    Unknown ids (or no context at all) fall back to ``User<id>``,
    ``Role<id>`` or ``Channel<id>``. ``@everyone``/``@here`` keep their word
    but lose the ability to notify anyone.

    Raises:
        ValueError: ``kind`` is not a mention kind.
    """
    if kind in _BROADCAST_WORDS:
        return escape_plain(marker) + _BROADCAST_WORDS[kind]

    prefix = _SYNTHETIC_PREFIX.get(kind)
    if prefix is None:
        raise ValueError(f"{kind!r} is not a mention kind")

    name = context.lookup(kind, mention_id) if context is not None else None
    if not name:
        name = f"{prefix}{mention_id}"

    lead = channel_marker if kind is SliceKind.CHANNEL_MENTION else marker
    return escape_plain(lead) + escape_plain(name)


def _at_name_boundary(name: str, key: str) -> bool:
    """True if ``key`` starts ``name`` or touches an underscore inside it."""
    if name.startswith(key):
        return True
    idx = name.find(key)
    while idx != -1:
        end = idx + len(key)
        if name[idx - 1] == "_" or (end < len(name) and name[end] == "_"):
            return True
        idx = name.find(key, idx + 1)
    return False


def resolve_emoji(name: Optional[str], table: Mapping[str, str] = EMOJI_TABLE) -> Optional[str]:
    """Map a custom emoji name to a standard glyph, or ``None``.

    Exact (case-insensitive) matches win. Otherwise a key of at least
    ``MIN_SUBSTRING_KEY`` characters may match at a name boundary, e.g.
    ``fire_animated`` → ``fire`` or ``blue_heart`` → ``heart``, but never as
    a bare infix (``unincloud`` matches nothing). The longest qualifying key
    wins.
    """
    if not name:
        return None
    name = name.lower()

    glyph = table.get(name)
    if glyph is not None:
        return glyph

    candidates = [
        key for key in table
        if len(key) >= MIN_SUBSTRING_KEY and _at_name_boundary(name, key)
    ]
    if not candidates:
        return None
    best = min(candidates, key=lambda key: (-len(key), key))
    logger.debug("Emoji %r matched key %r", name, best)
    return table[best]


def resolve_inline_references(
    text: Optional[str],
    context: Optional[ResolutionContext] = None,
    *,
    table: Mapping[str, str] = EMOJI_TABLE,
    marker: str = DEFAULT_MENTION_MARKER,
    channel_marker: str = DEFAULT_CHANNEL_MARKER,
) -> str:
    """Escape the content of a formatting span, resolving references in it.

    Spans never nest further markup, so this is a single flat pass:
    reference tokens are resolved, everything between them is escaped.
    """
    if not text:
        return ""

    parts = []
    pos = 0
    for ref in iter_constructs(text, REFERENCE_RE):
        parts.append(escape_plain(text[pos:ref.start]))
        if ref.kind is SliceKind.CUSTOM_EMOJI:
            parts.append(escape_plain(resolve_emoji(ref.captures[0], table)))
        else:
            mention_id = ref.captures[0] if ref.captures else None
            parts.append(resolve_mention(
                ref.kind, mention_id, context,
                marker=marker, channel_marker=channel_marker,
            ))
        pos = ref.end
    parts.append(escape_plain(text[pos:]))
    return "".join(parts)


def collect_references(text: Optional[str]) -> dict[str, set[str]]:
    """Collect the user, role and channel ids mentioned in ``text``.

    Lets a caller fetch display names up front and build a
    ``ResolutionContext`` for the conversion.
    """
    found: dict[str, set[str]] = {"users": set(), "roles": set(), "channels": set()}
    if not text:
        return found

    sections = {
        SliceKind.USER_MENTION: "users",
        SliceKind.ROLE_MENTION: "roles",
        SliceKind.CHANNEL_MENTION: "channels",
    }
    for ref in iter_constructs(text, REFERENCE_RE):
        section = sections.get(ref.kind)
        if section:
            found[section].add(ref.captures[0])
    return found
