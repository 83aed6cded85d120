from __future__ import annotations

from typing import Any

from pydantic import ConfigDict

from configargs.core.interfaces.model_bases import DomainModel


class ValueObject(DomainModel):
    """Base class for value objects.

    Value objects are immutable and compared by their values,
    not their identities.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True, frozen=True  # Value objects are immutable
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert this value object to a dictionary."""
        return self.model_dump()
