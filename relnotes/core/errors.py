"""Exit codes for relnotes commands.

Each code is the process exit status of a CLI command and should stay stable:
- 0: Success (including a changelog that was skipped in non-strict mode)
- 1: User error (bad arguments, unknown template)
- 2: Environment error (git missing, broken config file)
- 3: Git error (no changelog could be made in strict mode)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    GIT_ERROR = 3
