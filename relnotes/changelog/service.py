"""Best-effort changelog generation for a release.

This is the glue the release command runs before asking the user how to
write release notes:

1. pick the reference that ends the range (``select_head_ref``)
2. find the tag before it and read the commits in between
3. parse and render them (``generate_changelog``)
4. offer the changelog as a template when there is one
   (``template_choices`` / ``template_seed``)

Nothing here fails: a missing previous tag or a git error only means the
commit-log template is not offered.
"""

from __future__ import annotations

from relnotes.changelog.model import Changelog, NotesTemplate
from relnotes.changelog.parse import parse_log
from relnotes.changelog.render import render_changelog
from relnotes.core.config import ChangelogConfig
from relnotes.core.result import Err
from relnotes.git.history import HistorySource

__all__ = [
    "HEAD",
    "generate_changelog",
    "select_head_ref",
    "template_choices",
    "template_seed",
]

HEAD = "HEAD"


def select_head_ref(
    tag: str,
    *,
    tag_message: str | None,
    ref: str | None,
    history: HistorySource,
) -> str:
    """Choose the reference whose history the changelog describes.

    An annotated tag already exists, so its own history is used. Otherwise
    the tag is about to be created from ``ref`` (preferring the upstream the
    branch tracks) or from the current checkout.
    """
    if tag_message:
        return tag
    if ref:
        return history.branch_merge_ref(ref) or ref
    return HEAD


def generate_changelog(
    history: HistorySource,
    head_ref: str,
    *,
    previous: str | None = None,
    options: ChangelogConfig | None = None,
) -> Changelog:
    """Render the commits between the previous tag and ``head_ref``.

    Args:
        history: Where tags and commit messages come from
        head_ref: End of the range (included)
        previous: Start of the range (excluded); looked up when None
        options: Rendering options (defaults to "*" bullets, two-space indent)

    Returns:
        A Changelog; ``skipped_reason`` is set when no text could be made.
    """
    options = options or ChangelogConfig()

    if previous is None:
        tag_result = history.previous_tag(head_ref)
        if isinstance(tag_result, Err):
            return Changelog(
                head_ref=head_ref,
                previous_tag=None,
                skipped_reason=tag_result.error.message,
            )
        previous = tag_result.value

    range_expr = f"{previous}..{head_ref}"
    log_result = history.commit_log(range_expr)
    if isinstance(log_result, Err):
        return Changelog(
            head_ref=head_ref,
            previous_tag=previous,
            skipped_reason=str(log_result.error),
        )

    entries = parse_log(log_result.value)
    markdown = render_changelog(entries, bullet=options.bullet, body_indent=options.indent)
    return Changelog(
        head_ref=head_ref,
        previous_tag=previous,
        entries=entries,
        markdown=markdown,
        skipped_reason=None if entries else f"no commits in {range_expr}",
    )


def template_choices(changelog: str, tag_message: str | None) -> list[NotesTemplate]:
    """Menu of release-notes templates, in display order.

    The commit-log and tag-message choices appear only when there is text to
    seed the editor with.
    """
    choices = [NotesTemplate.WRITE_OWN]
    if changelog:
        choices.append(NotesTemplate.COMMIT_LOG)
    if tag_message:
        choices.append(NotesTemplate.TAG_MESSAGE)
    choices.append(NotesTemplate.LEAVE_BLANK)
    return choices


def template_seed(
    choice: NotesTemplate,
    *,
    changelog: str,
    tag_message: str | None,
) -> str | None:
    """Initial editor contents for ``choice``; None means skip the editor."""
    match choice:
        case NotesTemplate.WRITE_OWN:
            return ""
        case NotesTemplate.COMMIT_LOG:
            return changelog
        case NotesTemplate.TAG_MESSAGE:
            return tag_message or ""
        case NotesTemplate.LEAVE_BLANK:
            return None
