"""Platform layer: subprocess execution."""

from relnotes.platform.process import ProcessError, run

__all__ = ["ProcessError", "run"]
