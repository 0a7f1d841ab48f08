"""
Pydantic schemas for elements and pick outcomes.
"""

from .element import Element, IdentifiableElement
from .pick_result import PairResult, PickOutcome, PickSource

__all__ = [
    "Element",
    "IdentifiableElement",
    "PairResult",
    "PickOutcome",
    "PickSource",
]
