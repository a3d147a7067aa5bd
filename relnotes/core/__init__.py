"""Core types shared by every relnotes module: Result, exit codes, config."""

from relnotes.core.config import Config, ConfigError, load_config, load_config_or_default
from relnotes.core.errors import ErrorCode
from relnotes.core.result import Err, Ok, Result

__all__ = [
    "Config",
    "ConfigError",
    "Err",
    "ErrorCode",
    "Ok",
    "Result",
    "load_config",
    "load_config_or_default",
]
