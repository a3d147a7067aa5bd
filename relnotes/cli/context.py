from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

import typer

from relnotes.core.config import Config, config_path_for, load_config_or_default
from relnotes.core.errors import ErrorCode
from relnotes.core.result import Err
from relnotes.git.history import GitHistory, HistorySource
from relnotes.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    repo_root: Path
    config: Config
    history: HistorySource
    console: ConsoleProtocol


def exit_with(message: str, *, code: ErrorCode) -> NoReturn:
    typer.echo(f"error: {message}", err=True)
    raise typer.Exit(code=int(code))


def build_context(repo: Path | None = None) -> CLIContext:
    try:
        root = (repo or Path.cwd()).expanduser().resolve()
    except OSError as e:
        exit_with(f"invalid --repo: {e}", code=ErrorCode.USER_ERROR)

    if not root.is_dir():
        exit_with(f"--repo '{root}' is not a directory", code=ErrorCode.USER_ERROR)

    config_result = load_config_or_default(config_path_for(root))
    if isinstance(config_result, Err):
        exit_with(config_result.error.message, code=ErrorCode.ENV_ERROR)
    config = config_result.value

    if shutil.which(config.git.binary) is None:
        exit_with(f"{config.git.binary}: missing", code=ErrorCode.ENV_ERROR)

    return CLIContext(
        repo_root=root,
        config=config,
        history=GitHistory(root, binary=config.git.binary, timeout=config.git.timeout),
        console=RichConsole(),
    )
