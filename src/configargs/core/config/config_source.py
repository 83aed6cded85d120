from __future__ import annotations

from collections.abc import Mapping, Set
from types import MappingProxyType

from configargs.core.interfaces.config_source_interface import IConfigSource


class PropertiesConfigSource(IConfigSource):
    """Configuration source backed by a read-only mapping of properties.

    The mapping is copied on construction and never changes afterwards, so
    lookups need no locking.
    """

    def __init__(self, properties: Mapping[str, str], name: str, ordinal: int) -> None:
        self._properties: Mapping[str, str] = MappingProxyType(dict(properties))
        self._name = name
        self._ordinal = int(ordinal)

    @property
    def name(self) -> str:
        return self._name

    @property
    def ordinal(self) -> int:
        return self._ordinal

    def get_properties(self) -> Mapping[str, str]:
        return self._properties

    def get_property_names(self) -> Set[str]:
        return self._properties.keys()

    def get_value(self, property_name: str) -> str | None:
        return self._properties.get(property_name)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self._name!r} ordinal={self._ordinal}>"
