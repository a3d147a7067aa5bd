"""Result type used at every fallible seam.

Git queries, config loading and subprocess calls return ``Ok`` or ``Err``
instead of raising, so the changelog step can degrade to "no changelog"
without try/except blocks around each collaborator.

Usage:
    match history.previous_tag("v1.2.0"):
        case Ok(tag):
            print(f"previous: {tag}")
        case Err(error):
            print(f"no previous tag: {error.message}")
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Err", "Ok", "Result"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result carrying ``value``."""

    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result carrying ``error``."""

    error: E


type Result[T, E] = Ok[T] | Err[E]
