# Configuration package

from configargs.core.config.arg_config_source import ArgumentPropertySource
from configargs.core.config.arg_parser import parse_arguments, split_arguments
from configargs.core.config.config_source import PropertiesConfigSource
from configargs.core.config.env_config_source import EnvVarConfigSource
from configargs.core.config.environment import get_config_args, set_config_args
from configargs.core.config.property_mappers import (
    get_mapped_property_name,
    normalize_key,
)
from configargs.core.config.resolution import ConfigResolver, build_default_resolver

__all__ = [
    "ArgumentPropertySource",
    "ConfigResolver",
    "EnvVarConfigSource",
    "PropertiesConfigSource",
    "build_default_resolver",
    "get_config_args",
    "get_mapped_property_name",
    "normalize_key",
    "parse_arguments",
    "set_config_args",
    "split_arguments",
]
