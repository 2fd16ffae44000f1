"""Nominal marker base class for pydantic models.

`DomainModel` marks pydantic-based domain and configuration models so
static type checkers can tell them apart from plain dataclass DTOs.
"""

from __future__ import annotations

from pydantic import BaseModel


class DomainModel(BaseModel):
    """Nominal marker for Pydantic-based domain and configuration models."""

    def __repr__(self) -> str:
        """Provide a concise, one-line summary of the object."""
        class_name = self.__class__.__name__

        # Ajax commands identify themselves by kind, config models by name
        repr_attrs = ("command", "name")
        for attr in repr_attrs:
            if attr in type(self).model_fields:
                attr_value = getattr(self, attr)
                if attr_value is not None:
                    return f'<{class_name} {attr}="{attr_value}">'

        return f"<{class_name}>"
