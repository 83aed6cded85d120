"""
Argument Domain Model

Value objects produced while turning command-line arguments into
configuration properties.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import Field

from configargs.core.common.exceptions import MalformedArgumentError
from configargs.core.domain.base import ValueObject


class ParsedArgument(ValueObject):
    """A single ``--key=value`` argument mapped to its canonical property key."""

    key: str = Field(..., description="The canonical (namespaced) property key.")
    value: str = Field(..., description="Everything after the first '='.")
    token: str = Field(..., description="The argument as it was supplied.")


class ArgumentParseError(ValueObject):
    """Describes the first argument that could not be parsed."""

    token: str
    position: int = Field(..., ge=0, description="Index of the token in the list.")
    reason: str

    def to_exception(self) -> MalformedArgumentError:
        return MalformedArgumentError(
            self.reason, token=self.token, position=self.position
        )


class ArgumentParseResult(ValueObject):
    """Outcome of parsing a raw argument string.

    A failed result never carries properties: parsing stops at the first
    malformed argument and nothing collected before it is kept.
    """

    entries: tuple[tuple[str, str], ...] = Field(
        default=(), description="Property key/value pairs in insertion order."
    )
    skipped: tuple[str, ...] = ()
    error: ArgumentParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def properties(self) -> Mapping[str, str]:
        """The parsed properties as a read-only mapping."""
        return MappingProxyType(dict(self.entries))

    @classmethod
    def success(
        cls, properties: Mapping[str, str], skipped: tuple[str, ...] = ()
    ) -> ArgumentParseResult:
        return cls(entries=tuple(dict(properties).items()), skipped=skipped)

    @classmethod
    def failure(cls, error: ArgumentParseError) -> ArgumentParseResult:
        return cls(error=error)

    def unwrap(self) -> Mapping[str, str]:
        """Return the parsed properties as a read-only mapping.

        Raises:
            MalformedArgumentError: If parsing failed
        """
        if self.error is not None:
            raise self.error.to_exception()
        return self.properties
