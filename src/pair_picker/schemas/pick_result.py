"""
Outcome model returned by PairPicker.pick().
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PickOutcome(str, Enum):
    """How a pick attempt terminated."""

    SUCCESS = "success"
    INSUFFICIENT_ELEMENTS = "insufficient_elements"
    CANCELLED = "cancelled"
    INTERNAL_INCONSISTENCY = "internal_inconsistency"


class PickSource(str, Enum):
    """Which strategy produced a successful pair."""

    ONLY_TWO = "only_two"
    PRESELECTION = "preselection"
    INTERACTIVE = "interactive"


class PairResult(BaseModel):
    """
    Result of a single pick attempt.

    Holds exactly two elements on success and none otherwise.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    outcome: PickOutcome = Field(description="Termination kind")
    elements: List[Any] = Field(
        default_factory=list, description="The picked pair, empty unless success"
    )
    source: Optional[PickSource] = Field(
        default=None, description="Strategy that produced the pair"
    )
    ignored_preselection: int = Field(
        default=0,
        ge=0,
        description="Pre-selected elements skipped (extra matches or wrong type)",
    )
    error: Optional[str] = Field(
        default=None, description="Diagnostic for internal inconsistencies"
    )

    @model_validator(mode="after")
    def _check_pair_size(self) -> "PairResult":
        expected = 2 if self.outcome == PickOutcome.SUCCESS else 0
        if len(self.elements) != expected:
            raise ValueError(
                f"{self.outcome.value} result must hold {expected} elements, "
                f"got {len(self.elements)}"
            )
        return self

    @property
    def succeeded(self) -> bool:
        return self.outcome == PickOutcome.SUCCESS

    @property
    def first(self) -> Any:
        return self.elements[0] if self.elements else None

    @property
    def second(self) -> Any:
        return self.elements[1] if self.elements else None

    @classmethod
    def success(
        cls, first: Any, second: Any, source: PickSource, ignored: int = 0
    ) -> "PairResult":
        return cls(
            outcome=PickOutcome.SUCCESS,
            elements=[first, second],
            source=source,
            ignored_preselection=ignored,
        )

    @classmethod
    def insufficient(cls) -> "PairResult":
        return cls(outcome=PickOutcome.INSUFFICIENT_ELEMENTS)

    @classmethod
    def cancelled(cls) -> "PairResult":
        return cls(outcome=PickOutcome.CANCELLED)

    @classmethod
    def inconsistent(cls, error: str) -> "PairResult":
        return cls(outcome=PickOutcome.INTERNAL_INCONSISTENCY, error=error)
