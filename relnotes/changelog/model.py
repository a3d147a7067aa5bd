from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One commit message split into a one-line subject and a body.

    An empty ``body`` means the commit had no body.
    """

    subject: str
    body: str = ""

    @property
    def has_body(self) -> bool:
        return self.body != ""


@dataclass(frozen=True, slots=True)
class Changelog:
    """Outcome of best-effort changelog generation.

    ``skipped_reason`` is None when generation ran; otherwise it says why the
    changelog is empty (no previous tag, git failure).
    """

    head_ref: str
    previous_tag: str | None
    entries: tuple[LogEntry, ...] = ()
    markdown: str = ""
    skipped_reason: str | None = None

    @property
    def range_expr(self) -> str | None:
        if self.previous_tag is None:
            return None
        return f"{self.previous_tag}..{self.head_ref}"

    @property
    def is_available(self) -> bool:
        """True when there is changelog text to offer as a template."""
        return self.markdown != ""


class NotesTemplate(Enum):
    """Pre-fill choices for the release notes editor, in menu order."""

    WRITE_OWN = "Write my own."
    COMMIT_LOG = "Write using the commit log as a template."
    TAG_MESSAGE = "Write using the Git tag message as the template."
    LEAVE_BLANK = "Leave blank."

    @property
    def label(self) -> str:
        return self.value
