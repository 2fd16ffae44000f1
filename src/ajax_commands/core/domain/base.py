from __future__ import annotations

from typing import Any

from pydantic import ConfigDict

from ajax_commands.core.interfaces.model_bases import DomainModel


class ValueObject(DomainModel):
    """Base class for immutable values such as Ajax commands.

    Two values with the same fields are interchangeable; a command has no
    identity beyond its position in the list sent to the client.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True, frozen=True  # Commands are immutable
    )

    def equals(self, other: Any) -> bool:
        """Check whether ``other`` is the same kind of value with equal fields."""
        if not isinstance(other, self.__class__):
            return False

        return self.model_dump() == other.model_dump()

    def to_dict(self) -> dict[str, Any]:
        """Return the fields in declaration order, as sent over the wire."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ValueObject:
        """Rebuild a value from the mapping produced by :meth:`to_dict`."""
        return cls(**data)
