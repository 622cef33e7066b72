"""Tests for the MarkdownV2 entity pairing check."""

from ferry.markup.validation import is_balanced, unpaired_markers


class TestUnpairedMarkers:
    """Test unpaired_markers()."""

    def test_balanced(self):
        """Test paired markers report nothing."""
        assert unpaired_markers("*a* _b_ ~c~ ||d||") == []

    def test_odd_marker(self):
        assert unpaired_markers("*a") == ["*"]

    def test_reports_in_fixed_order(self):
        """Test markers are reported in a stable order."""
        assert unpaired_markers("|_*") == ["*", "_", "|"]

    def test_escaped_marker_ignored(self):
        """Test a backslash-escaped marker does not count."""
        assert unpaired_markers("\\*a") == []

    def test_escaped_backslash_does_not_escape_marker(self):
        """Test an escaped backslash leaves the following marker live."""
        assert unpaired_markers("\\\\*a") == ["*"]

    def test_inline_code_ignored(self):
        """Test markers inside inline code do not count."""
        assert unpaired_markers("`*`") == []

    def test_code_block_ignored(self):
        """Test markers inside a code block do not count."""
        assert unpaired_markers("```\n_ * ~\n```") == []

    def test_escaped_backtick_inside_code(self):
        assert unpaired_markers("`a\\`*`") == []

    def test_unterminated_code_runs_to_end(self):
        """Test an unterminated code span swallows the rest."""
        assert unpaired_markers("`*") == []


class TestIsBalanced:
    """Test is_balanced()."""

    def test_true(self):
        assert is_balanced("*_x_*")

    def test_false(self):
        assert not is_balanced("~x")

    def test_four_way_style(self):
        """Test the underline+bold+italic rendering is balanced."""
        assert is_balanced("*_\\_x\\__*")
        assert not is_balanced("*_\\_x\\_*")
