"""Tests for relnotes.git.history."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from relnotes.changelog.parse import parse_log
from relnotes.core.result import Err, Ok
from relnotes.git.history import CommandError, GitHistory, NotFoundError
from relnotes.platform.process import ProcessError

_RUN = "relnotes.git.history.run_process"


def _fail(cmd: list[str], returncode: int, stderr: str) -> Err[ProcessError]:
    return Err(ProcessError(command=tuple(cmd), returncode=returncode, stderr=stderr))


# =============================================================================
# Command construction and error mapping (no git needed)
# =============================================================================


class TestPreviousTag:
    def test_describes_parent_of_ref(self, tmp_path: Path) -> None:
        """The ref's own tag is excluded by describing ref^."""
        with patch(_RUN, return_value=Ok(b"v1.0.0\n")) as mock_run:
            result = GitHistory(tmp_path).previous_tag("v1.1.0")

        assert result == Ok("v1.0.0")
        cmd = mock_run.call_args.args[0]
        assert cmd == ["git", "describe", "--tags", "--abbrev=0", "v1.1.0^"]
        assert mock_run.call_args.kwargs["cwd"] == tmp_path

    def test_no_tag_is_not_found(self, tmp_path: Path) -> None:
        with patch(_RUN, return_value=_fail(["git"], 128, "fatal: No names found\n")):
            result = GitHistory(tmp_path).previous_tag("HEAD")

        assert isinstance(result, Err)
        assert result.error == NotFoundError(ref="HEAD", message="fatal: No names found")

    def test_git_missing_is_command_error(self, tmp_path: Path) -> None:
        with patch(_RUN, return_value=_fail(["git"], -1, "No such file or directory")):
            result = GitHistory(tmp_path).previous_tag("HEAD")

        assert isinstance(result, Err)
        assert isinstance(result.error, CommandError)
        assert result.error.returncode == -1


class TestCommitLog:
    def test_command_shape(self, tmp_path: Path) -> None:
        with patch(_RUN, return_value=Ok(b"a\x00")) as mock_run:
            result = GitHistory(tmp_path, binary="/usr/bin/git", timeout=5.0).commit_log("v1..v2")

        assert result == Ok(b"a\x00")
        cmd = mock_run.call_args.args[0]
        assert cmd == [
            "/usr/bin/git",
            "-c",
            "log.ShowSignature=false",
            "log",
            "--first-parent",
            "--reverse",
            "--pretty=format:%B%x00",
            "v1..v2",
        ]
        assert mock_run.call_args.kwargs["cwd"] == tmp_path
        assert mock_run.call_args.kwargs["timeout"] == 5.0

    def test_failure_wraps_stderr(self, tmp_path: Path) -> None:
        stderr = "fatal: ambiguous argument 'nope..HEAD'\n"
        with patch(_RUN, return_value=_fail(["git"], 128, stderr)):
            result = GitHistory(tmp_path).commit_log("nope..HEAD")

        assert isinstance(result, Err)
        assert result.error == CommandError(
            command="log nope..HEAD",
            message="fatal: ambiguous argument 'nope..HEAD'",
            returncode=128,
        )
        assert str(result.error).startswith("git log nope..HEAD: fatal")


class TestBranchMergeRef:
    def test_configured(self, tmp_path: Path) -> None:
        with patch(_RUN, return_value=Ok(b"refs/heads/main\n")) as mock_run:
            assert GitHistory(tmp_path).branch_merge_ref("topic") == "refs/heads/main"
        assert mock_run.call_args.args[0][-2:] == ["--get", "branch.topic.merge"]

    def test_unset(self, tmp_path: Path) -> None:
        with patch(_RUN, return_value=_fail(["git"], 1, "")):
            assert GitHistory(tmp_path).branch_merge_ref("topic") is None


# =============================================================================
# Against a real repository
# =============================================================================

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def _git(repo: Path, *args: str) -> None:
    subprocess.run(
        [
            "git",
            "-c",
            "user.name=Test",
            "-c",
            "user.email=test@example.com",
            "-c",
            "commit.gpgsign=false",
            "-c",
            "tag.gpgsign=false",
            *args,
        ],
        cwd=repo,
        check=True,
        capture_output=True,
    )


def _commit(repo: Path, message: str) -> None:
    _git(repo, "commit", "--allow-empty", "-q", "-m", message)


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    _git(tmp_path, "init", "-q")
    _commit(tmp_path, "Initial commit")
    _git(tmp_path, "tag", "v1.0.0")
    _commit(tmp_path, "Add feature")
    _commit(tmp_path, "Fix typo\n\nTypo in README")
    return tmp_path


@requires_git
class TestGitHistoryIntegration:
    def test_previous_tag_from_head(self, repo: Path) -> None:
        assert GitHistory(repo).previous_tag("HEAD") == Ok("v1.0.0")

    def test_previous_tag_excludes_own_tag(self, repo: Path) -> None:
        _git(repo, "tag", "v1.1.0")
        assert GitHistory(repo).previous_tag("v1.1.0") == Ok("v1.0.0")

    def test_first_release_has_no_previous_tag(self, repo: Path) -> None:
        result = GitHistory(repo).previous_tag("v1.0.0")
        assert isinstance(result, Err)
        assert isinstance(result.error, NotFoundError)

    def test_commit_log_oldest_first(self, repo: Path) -> None:
        result = GitHistory(repo).commit_log("v1.0.0..HEAD")

        assert isinstance(result, Ok)
        entries = parse_log(result.value)
        assert [e.subject for e in entries] == ["Add feature", "Fix typo"]
        assert entries[1].body == "Typo in README"

    def test_commit_log_bad_range(self, repo: Path) -> None:
        result = GitHistory(repo).commit_log("v9.9.9..HEAD")
        assert isinstance(result, Err)
        assert result.error.returncode != 0
