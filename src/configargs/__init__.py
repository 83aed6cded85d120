"""Command-line argument configuration source."""

from configargs.core.common.exceptions import (
    ConfigArgsError,
    ConfigurationError,
    MalformedArgumentError,
)
from configargs.core.config.arg_config_source import ArgumentPropertySource
from configargs.core.config.arg_parser import parse_arguments
from configargs.core.config.resolution import ConfigResolver, build_default_resolver

__all__ = [
    "ArgumentPropertySource",
    "ConfigArgsError",
    "ConfigResolver",
    "ConfigurationError",
    "MalformedArgumentError",
    "build_default_resolver",
    "parse_arguments",
]
