"""
Configuration source for properties passed as command-line arguments.

The arguments arrive as a single comma-separated string, e.g.
``--http-enabled=true,--http-port=8180,--db=postgres``. Each argument is
mapped to its configuration property by prefixing the key with the ``kc``
namespace, so ``--http-port=8180`` becomes ``kc.http-port``.
"""

from __future__ import annotations

from configargs.constants import (
    NS_KEYCLOAK_PREFIX,
    ConfigSourceName,
    ConfigSourceOrdinal,
)
from configargs.core.config.arg_parser import KeyMapper, parse_arguments
from configargs.core.config.config_source import PropertiesConfigSource
from configargs.core.config.environment import get_config_args
from configargs.core.config.property_mappers import (
    get_mapped_property_name,
    normalize_key,
)


class ArgumentPropertySource(PropertiesConfigSource):
    """Properties parsed from command-line arguments.

    Ranks above the environment and the defaults. Lookups accept dashed
    property names (``kc-http-port``) and translate them to the dotted form
    the values are stored under.
    """

    def __init__(
        self,
        raw_args: str | None = None,
        *,
        namespace_prefix: str = NS_KEYCLOAK_PREFIX,
        alias_mapper: KeyMapper = get_mapped_property_name,
        normalizer: KeyMapper = normalize_key,
    ) -> None:
        """Parse ``raw_args`` into properties.

        Args:
            raw_args: Comma-separated arguments; None or blank means no arguments
            namespace_prefix: Prefix prepended to every argument key
            alias_mapper: Maps a canonical key to the property it feeds
            normalizer: Produces the lookup-friendly spelling of a key

        Raises:
            MalformedArgumentError: If an argument lacks the ``--`` prefix or
                has an empty key
        """
        result = parse_arguments(
            raw_args,
            namespace_prefix=namespace_prefix,
            alias_mapper=alias_mapper,
            normalizer=normalizer,
        )
        properties = result.unwrap()
        self._skipped = result.skipped

        super().__init__(properties, ConfigSourceName.CLI.value, ConfigSourceOrdinal.CLI)

    @classmethod
    def from_environment(cls, **kwargs) -> ArgumentPropertySource:
        """Build the source from the arguments stored in the environment."""
        return cls(get_config_args(), **kwargs)

    @property
    def skipped_arguments(self) -> tuple[str, ...]:
        """Flags that were passed without a value and produced no property."""
        return self._skipped

    def get_value(self, property_name: str) -> str | None:
        return super().get_value(property_name.replace("-", "."))
