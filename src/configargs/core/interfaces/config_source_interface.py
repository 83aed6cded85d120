"""
Configuration source interface.

A configuration source answers point lookups for property names and
advertises an ordinal; a resolver consults sources from the highest
ordinal down.
"""

from __future__ import annotations

import abc
from collections.abc import Set


class IConfigSource(abc.ABC):
    """Interface for a named, ranked source of configuration properties."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """The name the source is registered under."""

    @property
    @abc.abstractmethod
    def ordinal(self) -> int:
        """The priority of the source. Higher values win."""

    @abc.abstractmethod
    def get_value(self, property_name: str) -> str | None:
        """Get the value of a property.

        Args:
            property_name: The property name as queried by the resolver

        Returns:
            The value if the source defines the property, None otherwise
        """

    @abc.abstractmethod
    def get_property_names(self) -> Set[str]:
        """Get the names of all properties defined by this source."""
