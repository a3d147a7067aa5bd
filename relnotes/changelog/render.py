"""Render LogEntry values as a Markdown bullet list.

Rendering is one-way: bodies are indented and joined, so parsing the output
again does not give back the original entries.
"""

from __future__ import annotations

from collections.abc import Iterable

from relnotes.changelog.model import LogEntry

__all__ = ["indent", "render_changelog"]


def indent(text: str, prefix: str) -> str:
    """Prefix every line of ``text`` with ``prefix``.

    Blank-only text is returned unchanged.
    """
    if text.strip() == "":
        return text
    return "\n".join(prefix + line for line in text.split("\n"))


def render_changelog(
    entries: Iterable[LogEntry],
    *,
    bullet: str = "*",
    body_indent: str = "  ",
) -> str:
    """Render entries, oldest first, as Markdown.

    Each subject becomes ``"* subject"``; a body follows as its own block
    with every line indented. Blocks are separated by a blank line. No
    entries gives an empty string.
    """
    blocks: list[str] = []
    for entry in entries:
        blocks.append(f"{bullet} {entry.subject}")
        if entry.has_body:
            blocks.append(indent(entry.body, body_indent))
    return "\n\n".join(blocks)
