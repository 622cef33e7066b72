"""Tests for MarkdownV2 escaping."""

import pytest

from ferry.markup.escaping import (
    PAIRED_MARKERS,
    RESERVED_CHARS,
    escape_code,
    escape_plain,
    escape_url,
)


def _unescaped_reserved(text: str) -> list[str]:
    """Reserved characters in ``text`` not preceded by an escaping backslash."""
    found = []
    i = 0
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] in RESERVED_CHARS:
            found.append(text[i])
        i += 1
    return found


# ── escape_plain ────────────────────────────────────────────

class TestEscapePlain:
    """Test escape_plain()."""

    @pytest.mark.parametrize("char", list(RESERVED_CHARS))
    def test_every_reserved_char(self, char):
        """Test each reserved character gets a backslash."""
        assert escape_plain(char) == "\\" + char

    def test_no_reserved_chars_unchanged(self):
        assert escape_plain("hello world, how are you") == "hello world, how are you"

    def test_sentence(self):
        assert escape_plain("1+1=2. Done!") == "1\\+1\\=2\\. Done\\!"

    def test_backslash(self):
        """Test a literal backslash is doubled."""
        assert escape_plain("a\\b") == "a\\\\b"

    def test_unicode_passthrough(self):
        """Test non-ASCII text, including the mention markers, is untouched."""
        assert escape_plain("🔥 привет ＠") == "🔥 привет ＠"

    def test_empty_and_none(self):
        assert escape_plain("") == ""
        assert escape_plain(None) == ""

    def test_not_idempotent(self):
        """Test escaping twice escapes the backslashes too."""
        once = escape_plain("a.b")
        assert once == "a\\.b"
        assert escape_plain(once) == "a\\\\\\.b"

    def test_totality(self):
        """Test no reserved character survives unescaped."""
        nasty = "_*[]()~`>#+-=|{}.!\\ mixed *with* text_ and [links](x)"
        assert _unescaped_reserved(escape_plain(nasty)) == []


# ── escape_code / escape_url ────────────────────────────────

class TestEscapeCode:
    """Test escape_code()."""

    def test_only_backtick_and_backslash(self):
        """Test only backticks and backslashes are escaped in code."""
        assert escape_code("a`b\\c.d*e") == "a\\`b\\\\c.d*e"

    def test_empty(self):
        assert escape_code("") == ""


class TestEscapeUrl:
    """Test escape_url()."""

    def test_closing_paren_and_backslash(self):
        """Test a closing paren cannot end the link early."""
        assert escape_url("https://x.com/a(b)\\") == "https://x.com/a(b\\)\\\\"

    def test_paired_markers_escaped(self):
        """Test entity markers in URLs are escaped."""
        assert escape_url("https://x.com/a_b*c~d|e") == "https://x.com/a\\_b\\*c\\~d\\|e"

    def test_plain_url_unchanged(self):
        assert escape_url("https://example.com/path?q=1") == "https://example.com/path?q=1"

    def test_paired_markers_constant(self):
        assert set(PAIRED_MARKERS) == {"*", "_", "~", "|"}
