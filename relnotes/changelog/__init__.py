"""Changelog derivation: parse commit messages, render Markdown.

Usage:
    from relnotes.changelog import generate_changelog, select_head_ref
    from relnotes.git import GitHistory

    history = GitHistory(repo_root)
    head = select_head_ref("v1.4.0", tag_message=None, ref="main", history=history)
    print(generate_changelog(history, head).markdown)
"""

from relnotes.changelog.model import Changelog, LogEntry, NotesTemplate
from relnotes.changelog.parse import parse_log, parse_record
from relnotes.changelog.render import indent, render_changelog
from relnotes.changelog.service import (
    HEAD,
    generate_changelog,
    select_head_ref,
    template_choices,
    template_seed,
)

__all__ = [
    "HEAD",
    "Changelog",
    "LogEntry",
    "NotesTemplate",
    "generate_changelog",
    "indent",
    "parse_log",
    "parse_record",
    "render_changelog",
    "select_head_ref",
    "template_choices",
    "template_seed",
]
