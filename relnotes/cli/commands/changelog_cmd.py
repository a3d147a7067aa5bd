from __future__ import annotations

from pathlib import Path

import typer

from relnotes.changelog.model import Changelog, NotesTemplate
from relnotes.changelog.service import (
    generate_changelog,
    select_head_ref,
    template_choices,
    template_seed,
)
from relnotes.cli.context import CLIContext, build_context, exit_with
from relnotes.core.errors import ErrorCode


def _generate(
    ctx: CLIContext,
    *,
    tag: str,
    ref: str | None,
    tag_message: str | None,
    previous: str | None,
) -> Changelog:
    head_ref = select_head_ref(tag, tag_message=tag_message, ref=ref, history=ctx.history)
    return generate_changelog(
        ctx.history,
        head_ref,
        previous=previous,
        options=ctx.config.changelog,
    )


def _parse_template(name: str) -> NotesTemplate:
    key = name.strip().upper().replace("-", "_")
    try:
        return NotesTemplate[key]
    except KeyError:
        valid = ", ".join(t.name.lower().replace("_", "-") for t in NotesTemplate)
        exit_with(f"unknown template '{name}' (expected one of: {valid})", code=ErrorCode.USER_ERROR)


def changelog(
    tag: str = typer.Argument(..., help="Tag being released (e.g. v1.2.0)."),
    ref: str | None = typer.Option(
        None,
        "--ref",
        "-r",
        help="Branch, tag or SHA the release is cut from when the tag does not exist yet.",
    ),
    tag_message: str | None = typer.Option(
        None,
        "--tag-message",
        "-T",
        help="Annotation of an existing tag; the tag's own history is then used.",
    ),
    previous: str | None = typer.Option(
        None,
        "--from",
        help="Start of the range (default: nearest tag before the release).",
    ),
    repo: Path | None = typer.Option(None, "--repo", help="Repository root (default: cwd)."),
    strict: bool = typer.Option(False, "--strict", help="Fail when no changelog can be made."),
) -> None:
    """Print the commit-log changelog for a release as Markdown."""
    ctx = build_context(repo)
    result = _generate(ctx, tag=tag, ref=ref, tag_message=tag_message, previous=previous)

    if not result.is_available:
        reason = result.skipped_reason or "empty changelog"
        if strict:
            exit_with(f"changelog unavailable: {reason}", code=ErrorCode.GIT_ERROR)
        ctx.console.warning(f"changelog skipped: {reason}")
        return

    ctx.console.info(f"{len(result.entries)} commit(s) in {result.range_expr}")
    typer.echo(result.markdown)


def templates(
    tag: str = typer.Argument(..., help="Tag being released (e.g. v1.2.0)."),
    ref: str | None = typer.Option(None, "--ref", "-r", help="Ref the release is cut from."),
    tag_message: str | None = typer.Option(
        None,
        "--tag-message",
        "-T",
        help="Annotation of an existing tag.",
    ),
    previous: str | None = typer.Option(None, "--from", help="Start of the range."),
    repo: Path | None = typer.Option(None, "--repo", help="Repository root (default: cwd)."),
    seed: str | None = typer.Option(
        None,
        "--seed",
        help="Print the editor text for a template (write-own, commit-log, tag-message, leave-blank).",
    ),
) -> None:
    """List release-notes templates, or print the text one starts from."""
    ctx = build_context(repo)
    result = _generate(ctx, tag=tag, ref=ref, tag_message=tag_message, previous=previous)
    choices = template_choices(result.markdown, tag_message)

    if seed is None:
        if result.skipped_reason:
            ctx.console.warning(f"commit log template unavailable: {result.skipped_reason}")
        for i, choice in enumerate(choices, start=1):
            typer.echo(f"{i}. {choice.label}")
        return

    choice = _parse_template(seed)
    if choice not in choices:
        exit_with(f"template not available: {choice.label}", code=ErrorCode.USER_ERROR)

    text = template_seed(choice, changelog=result.markdown, tag_message=tag_message)
    if text is None:
        ctx.console.info("release notes left blank; no editor")
        return
    typer.echo(text)
