from enum import Enum

ARG_PREFIX: str = "--"
ARG_SPLIT: str = ","
ARG_KEY_VALUE_SEPARATOR: str = "="

NS_KEYCLOAK: str = "kc"
NS_KEYCLOAK_PREFIX: str = NS_KEYCLOAK + "."

CONFIG_ARGS_ENV_VAR: str = "KC_CONFIG_ARGS"
ENV_VAR_PREFIX: str = "KC_"


class ConfigSourceName(str, Enum):
    """Enum for the names config sources register under."""

    CLI = "CliConfigSource"
    ENV = "KcEnvVarConfigSource"
    DEFAULTS = "DefaultsConfigSource"


class ConfigSourceOrdinal(int, Enum):
    """Enum for config source priorities. Higher values win."""

    CLI = 500
    ENV = 300
    DEFAULTS = 100
