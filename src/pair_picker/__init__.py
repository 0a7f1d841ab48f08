"""
Pick a pair of same-typed elements from a CAD host session.
"""

from .errors import HostConfigurationError, ModelFileError, PairPickerError
from .schemas import Element, IdentifiableElement, PairResult, PickOutcome, PickSource
from .services import PairPicker
from .tools.host import (
    CANCELLED,
    ElementsOfTypeFilter,
    HostSession,
    InMemoryHost,
)

__version__ = "0.1.0"

__all__ = [
    "PairPicker",
    "PairResult",
    "PickOutcome",
    "PickSource",
    "Element",
    "IdentifiableElement",
    "HostSession",
    "InMemoryHost",
    "ElementsOfTypeFilter",
    "CANCELLED",
    "PairPickerError",
    "HostConfigurationError",
    "ModelFileError",
]
