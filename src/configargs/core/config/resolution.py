"""Resolution of property values across ranked configuration sources."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

from configargs.constants import ConfigSourceName, ConfigSourceOrdinal
from configargs.core.common.logging_utils import redact_property_value
from configargs.core.config.arg_config_source import ArgumentPropertySource
from configargs.core.config.config_source import PropertiesConfigSource
from configargs.core.config.env_config_source import EnvVarConfigSource
from configargs.core.config.environment import get_config_args
from configargs.core.interfaces.config_source_interface import IConfigSource

logger = logging.getLogger(__name__)


@dataclass
class ResolvedParameter:
    """Represents the final resolved value for a configuration parameter."""

    name: str
    value: str
    source: str
    ordinal: int


class ConfigResolver:
    """Look up properties in sources ordered by ordinal, highest first.

    Sources sharing an ordinal keep the order they were given in.
    """

    def __init__(self, sources: Iterable[IConfigSource]) -> None:
        self._sources: tuple[IConfigSource, ...] = tuple(
            sorted(sources, key=lambda source: source.ordinal, reverse=True)
        )

    @property
    def sources(self) -> tuple[IConfigSource, ...]:
        return self._sources

    def resolve(self, name: str) -> ResolvedParameter | None:
        for source in self._sources:
            value = source.get_value(name)
            if value is not None:
                return ResolvedParameter(
                    name=name, value=value, source=source.name, ordinal=source.ordinal
                )
        return None

    def get_value(self, name: str, default: Any = None) -> Any:
        """Get a property value from the highest ranked source defining it.

        Args:
            name: The property name
            default: Returned when no source defines the property

        Returns:
            The property value
        """
        resolved = self.resolve(name)
        return default if resolved is None else resolved.value

    def build_report(self, names: Iterable[str]) -> list[ResolvedParameter]:
        """Resolve ``names``, leaving out those no source defines."""
        report = [
            resolved
            for resolved in (self.resolve(name) for name in set(names))
            if resolved is not None
        ]
        return sorted(report, key=lambda r: r.name)

    def log(self, target_logger: logging.Logger, names: Iterable[str]) -> None:
        """Emit log entries describing each resolved configuration value."""
        for entry in self.build_report(names):
            target_logger.info(
                "Loaded parameter %s = %r (%s)",
                entry.name,
                redact_property_value(entry.name, entry.value),
                entry.source,
            )


def build_default_resolver(
    defaults: Mapping[str, str] | None = None,
    environ: MutableMapping[str, str] | None = None,
) -> ConfigResolver:
    """Assemble command-line arguments, environment variables and defaults.

    Raises:
        MalformedArgumentError: If the stored command-line arguments are invalid
    """
    sources: list[IConfigSource] = [
        ArgumentPropertySource(get_config_args(environ)),
        EnvVarConfigSource(environ),
        PropertiesConfigSource(
            defaults or {},
            ConfigSourceName.DEFAULTS.value,
            ConfigSourceOrdinal.DEFAULTS,
        ),
    ]
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Configuration sources: %s",
            ", ".join(f"{s.name}({s.ordinal})" for s in sources),
        )
    return ConfigResolver(sources)


__all__ = [
    "ConfigResolver",
    "ResolvedParameter",
    "build_default_resolver",
]
