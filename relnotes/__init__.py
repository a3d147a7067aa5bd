"""relnotes: Markdown release notes from local git history."""

__version__ = "0.1.0"
