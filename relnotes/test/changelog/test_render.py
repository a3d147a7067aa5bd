"""Tests for relnotes.changelog.render."""

from __future__ import annotations

from relnotes.changelog.model import LogEntry
from relnotes.changelog.parse import parse_log
from relnotes.changelog.render import indent, render_changelog


class TestIndent:
    def test_every_line_prefixed(self) -> None:
        assert indent("x\ny", "  ") == "  x\n  y"

    def test_inner_blank_lines_prefixed(self) -> None:
        assert indent("a\n\nb", "  ") == "  a\n  \n  b"

    def test_blank_text_unchanged(self) -> None:
        assert indent("   ", "  ") == "   "
        assert indent("", "  ") == ""


class TestRenderChangelog:
    """Tests for Markdown rendering."""

    def test_empty_sequence(self) -> None:
        assert render_changelog([]) == ""

    def test_subject_and_indented_body(self) -> None:
        entries = [LogEntry(subject="A", body=""), LogEntry(subject="B", body="x\ny")]
        assert render_changelog(entries) == "* A\n\n* B\n\n  x\n  y"

    def test_single_entry_without_body(self) -> None:
        assert render_changelog([LogEntry(subject="Only")]) == "* Only"

    def test_whitespace_only_body_not_indented(self) -> None:
        assert render_changelog([LogEntry(subject="A", body="  ")]) == "* A\n\n  "

    def test_custom_bullet_and_indent(self) -> None:
        entries = [LogEntry(subject="A", body="line")]
        assert render_changelog(entries, bullet="-", body_indent="    ") == "- A\n\n    line"

    def test_accepts_generator(self) -> None:
        entries = (LogEntry(subject=s) for s in ("one", "two"))
        assert render_changelog(entries) == "* one\n\n* two"

    def test_rendering_is_not_reversible(self) -> None:
        """Parsing rendered output does not give back the entries."""
        entries = (LogEntry(subject="A"), LogEntry(subject="B", body="x"))
        rendered = render_changelog(entries)
        assert parse_log(rendered) != entries


class TestEndToEnd:
    def test_two_commit_range(self) -> None:
        """git output for two commits renders as a two-item list."""
        raw = b"Add feature\n\x00\nFix typo\n\nTypo in README\n\x00"
        assert render_changelog(parse_log(raw)) == "* Add feature\n\n* Fix typo\n\n  Typo in README"

    def test_whitespace_only_body(self) -> None:
        """A body of only spaces is kept as-is after the blank line."""
        raw = b"A\n\n  \n\x00"
        assert render_changelog(parse_log(raw)) == "* A\n\n  "
