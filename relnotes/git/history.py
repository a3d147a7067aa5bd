"""Read-only history queries used to build a changelog.

The changelog pipeline only needs three questions answered by version
control, captured by ``HistorySource``:

- which tag precedes a reference (``previous_tag``)
- what the first-parent commit messages of a range are (``commit_log``)
- which upstream ref a local branch merges from (``branch_merge_ref``)

``GitHistory`` answers them by running the git binary. Tests substitute any
object with the same three methods.

Usage:
    history = GitHistory(Path("/path/to/repo"))
    match history.previous_tag("HEAD"):
        case Ok(tag):
            raw = history.commit_log(f"{tag}..HEAD")
        case Err(NotFoundError()):
            ...  # first release, nothing to summarize
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from relnotes.core.result import Err, Ok, Result
from relnotes.platform.process import ProcessError
from relnotes.platform.process import run as run_process

__all__ = [
    "LOG_RECORD_SEPARATOR",
    "CommandError",
    "GitHistory",
    "HistoryError",
    "HistorySource",
    "NotFoundError",
]

# Each commit message is terminated by this byte in commit_log output.
LOG_RECORD_SEPARATOR = b"\x00"

_LOG_FORMAT = "--pretty=format:%B%x00"


@dataclass(frozen=True, slots=True)
class NotFoundError:
    """No tag precedes ``ref`` (first release) or ``ref`` does not resolve.

    Expected during normal use: callers skip changelog generation.
    """

    ref: str
    message: str


@dataclass(frozen=True, slots=True)
class CommandError:
    """A git invocation failed or could not be started.

    Attributes:
        command: The git subcommand, e.g. "log v1.0..HEAD"
        message: Error text reported by git (stderr) or by the OS
        returncode: Process exit code, -1 if git never ran
    """

    command: str
    message: str
    returncode: int = 1

    def __str__(self) -> str:
        return f"git {self.command}: {self.message}"


type HistoryError = NotFoundError | CommandError


class HistorySource(Protocol):
    """Version-control queries needed to derive a changelog."""

    def previous_tag(self, ref: str) -> Result[str, HistoryError]:
        """Nearest tag reachable from ``ref``'s first parent, stripped."""
        ...

    def commit_log(self, range_expr: str) -> Result[bytes, CommandError]:
        """Raw NUL-terminated messages of ``range_expr``, oldest first."""
        ...

    def branch_merge_ref(self, branch: str) -> str | None:
        """The ``branch.<name>.merge`` setting, or None when unset."""
        ...


class GitHistory:
    """HistorySource backed by the git command line.

    Attributes:
        path: Repository working directory
        binary: git executable name or path
        timeout: Seconds allowed per git call (None waits indefinitely)
    """

    def __init__(self, path: Path, *, binary: str = "git", timeout: float | None = None) -> None:
        self.path = path
        self.binary = binary
        self.timeout = timeout

    def previous_tag(self, ref: str) -> Result[str, HistoryError]:
        """Run ``git describe --tags --abbrev=0 <ref>^``.

        Describing the parent rather than ``ref`` itself excludes a tag
        sitting on ``ref``'s own commit.

        Returns:
            Ok(tag name) on success
            Err(NotFoundError) if git found no tag or could not resolve ref
            Err(CommandError) if git could not be run at all
        """
        result = self._run(["describe", "--tags", "--abbrev=0", f"{ref}^"])
        match result:
            case Err(e) if e.returncode < 0:
                return Err(self._command_error("describe", e))
            case Err(e):
                return Err(
                    NotFoundError(
                        ref=ref,
                        message=e.stderr.strip() or f"no tag found before {ref}",
                    )
                )
            case Ok(stdout):
                tag = stdout.decode("utf-8", errors="replace").strip()
                if not tag:
                    return Err(NotFoundError(ref=ref, message=f"no tag found before {ref}"))
                return Ok(tag)

    def commit_log(self, range_expr: str) -> Result[bytes, CommandError]:
        """List first-parent commits of ``range_expr``, oldest first.

        Each full message (subject and body) is followed by a NUL byte.
        ``log.ShowSignature`` is forced off so signature checks never mix
        into the output.
        """
        result = self._run(
            [
                "-c",
                "log.ShowSignature=false",
                "log",
                "--first-parent",
                "--reverse",
                _LOG_FORMAT,
                range_expr,
            ]
        )
        match result:
            case Err(e):
                return Err(self._command_error(f"log {range_expr}", e))
            case Ok(stdout):
                return Ok(stdout)

    def branch_merge_ref(self, branch: str) -> str | None:
        """Read ``branch.<branch>.merge`` from git config.

        Unset keys and unreadable config both yield None.
        """
        result = self._run(["config", "--get", f"branch.{branch}.merge"])
        match result:
            case Ok(stdout):
                value = stdout.decode("utf-8", errors="replace").strip()
                return value or None
            case Err(_):
                return None

    def _run(self, args: list[str]) -> Result[bytes, ProcessError]:
        """Run a git command in this repository."""
        return run_process(
            [self.binary, *args],
            cwd=self.path,
            timeout=self.timeout,
        )

    @staticmethod
    def _command_error(command: str, error: ProcessError) -> CommandError:
        return CommandError(
            command=command,
            message=error.stderr.strip() or str(error),
            returncode=error.returncode,
        )
