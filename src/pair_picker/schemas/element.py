"""
Document element models.
"""

from typing import Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class IdentifiableElement(Protocol):
    """
    Anything the host hands out as an element handle.

    The picker only relies on a stable identifier; every other attribute
    belongs to the host document model.
    """

    element_id: str


class Element(BaseModel):
    """
    Reference element handle used by the bundled hosts.

    Equality and hashing go through element_id only, so two handles that
    point at the same document element compare equal even if their
    descriptive fields were read at different times.
    """

    model_config = ConfigDict(frozen=True)

    element_id: str = Field(description="Host-assigned unique identifier")
    category: str = Field(description="Element type tag (Wall, Door, Pipe, ...)")
    name: Optional[str] = Field(default=None, description="Human-readable label")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.element_id == other.element_id

    def __hash__(self) -> int:
        return hash(self.element_id)

    def display_name(self) -> str:
        """Label shown in prompts and results."""
        if self.name:
            return f"{self.name} [{self.category} {self.element_id}]"
        return f"{self.category} {self.element_id}"
