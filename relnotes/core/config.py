"""Typed configuration for relnotes.

Configuration lives in ``relnotes.toml`` at the repository root (or the file
named by ``RELNOTES_CONFIG``). Every key is optional:

    [git]
    binary = "git"      # git executable to run
    timeout = 30        # seconds per git call; unset means wait forever

    [changelog]
    bullet = "*"        # list marker for each commit subject
    indent = "  "       # prefix for every body line
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_number, get_raw_str, get_str, get_table

__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_FILE_NAME",
    "ChangelogConfig",
    "Config",
    "ConfigError",
    "GitConfig",
    "config_path_for",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILE_NAME = "relnotes.toml"
CONFIG_ENV_VAR = "RELNOTES_CONFIG"

DEFAULT_GIT_BINARY = "git"
DEFAULT_BULLET = "*"
DEFAULT_INDENT = "  "


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class GitConfig:
    """How the git binary is invoked."""

    binary: str = DEFAULT_GIT_BINARY
    timeout: float | None = None


@dataclass(frozen=True, slots=True)
class ChangelogConfig:
    """Markdown rendering options."""

    bullet: str = DEFAULT_BULLET
    indent: str = DEFAULT_INDENT


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    git: GitConfig = field(default_factory=GitConfig)
    changelog: ChangelogConfig = field(default_factory=ChangelogConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from parsed TOML."""
        git: StrDict = get_table(data, "git") or {}
        changelog: StrDict = get_table(data, "changelog") or {}

        timeout = get_number(git, "timeout")
        if timeout is not None and timeout <= 0:
            raise ValueError(f"git.timeout must be positive, got {timeout}")

        indent = get_raw_str(changelog, "indent")
        return cls(
            git=GitConfig(
                binary=get_str(git, "binary") or DEFAULT_GIT_BINARY,
                timeout=timeout,
            ),
            changelog=ChangelogConfig(
                bullet=get_str(changelog, "bullet") or DEFAULT_BULLET,
                indent=DEFAULT_INDENT if indent is None else indent,
            ),
        )


def config_path_for(repo_root: Path) -> Path:
    """Return the config file to use for ``repo_root``.

    ``RELNOTES_CONFIG`` wins over the file in the repository root.
    """
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return repo_root / CONFIG_FILE_NAME


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Like load_config, but a missing file yields the defaults.

    A file that exists but cannot be parsed is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
