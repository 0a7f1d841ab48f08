"""
Host-agnostic protocol for the document session a picker talks to.

Hosts (a CAD application bridge, the in-memory reference host, the
terminal host) implement this protocol. This file contains no host-specific
code.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence, Union


class _Cancelled:
    """Sentinel returned by prompt_pick_one when the user aborts."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CANCELLED"

    def __bool__(self) -> bool:
        return False


CANCELLED = _Cancelled()


class HostSession(ABC):
    """
    The three document/UI capabilities a PairPicker consumes.
    """

    @abstractmethod
    def query_all_elements_of_type(self, element_type: Any) -> Sequence[Any]:
        """
        Get every element in the document whose type matches element_type.

        Args:
            element_type: Type tag, either a class or a category string

        Returns:
            Matching element handles, in no guaranteed order
        """
        ...

    @abstractmethod
    def get_current_selection(self) -> Sequence[Any]:
        """
        Get the user's current transient selection.

        Returns:
            Selected element handles, of any type, in host enumeration order
        """
        ...

    @abstractmethod
    def prompt_pick_one(
        self, selection_filter: Any, prompt_text: str
    ) -> Union[Any, _Cancelled]:
        """
        Block until the user picks one element or cancels.

        Args:
            selection_filter: Object with accepts(element) -> bool restricting
                what may be picked
            prompt_text: Instruction shown to the user

        Returns:
            The picked element handle, or CANCELLED
        """
        ...

    def describe(self) -> str:
        """Short host description for logs."""
        return type(self).__name__
