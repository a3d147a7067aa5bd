"""Parse ``git log --pretty=format:%B%x00`` output into LogEntry values."""

from __future__ import annotations

from relnotes.changelog.model import LogEntry
from relnotes.git.history import LOG_RECORD_SEPARATOR

__all__ = ["parse_log", "parse_record"]


def parse_record(record: str) -> LogEntry | None:
    """Split one commit message into subject and body.

    Returns None for an empty record. A record holding only whitespace still
    produces an entry.
    """
    text = record.replace("\r\n", "\n")
    # git separates formatted commits with a newline, so every record after
    # the first starts with one.
    text = text.removeprefix("\n")
    if text == "":
        return None

    # %B always ends the message with a newline.
    subject, _, body = text.rstrip("\n").partition("\n\n")
    return LogEntry(subject=subject.replace("\n", " "), body=body)


def parse_log(raw: bytes | str) -> tuple[LogEntry, ...]:
    """Parse NUL-terminated commit messages, keeping their order.

    Each record is decoded as UTF-8 with invalid sequences replaced; a commit
    with a broken encoding still shows up in the changelog.
    """
    data = raw.encode("utf-8") if isinstance(raw, str) else raw

    entries: list[LogEntry] = []
    for record in data.split(LOG_RECORD_SEPARATOR):
        entry = parse_record(record.decode("utf-8", errors="replace"))
        if entry is not None:
            entries.append(entry)
    return tuple(entries)
