"""
Type-membership filters handed to interactive picks.
"""

from typing import Any


def matches_type(element: Any, element_type: Any) -> bool:
    """
    Check whether an element belongs to the requested type.

    A class tag is an isinstance test. A string tag is compared
    case-insensitively against the element's ``category`` attribute.

    Args:
        element: Element handle from the host
        element_type: Class or category string

    Returns:
        True if the element is of that type
    """
    if element is None:
        return False

    if isinstance(element_type, type):
        return isinstance(element, element_type)

    category = getattr(element, "category", None)
    if not isinstance(category, str):
        return False
    return category.strip().lower() == str(element_type).strip().lower()


class ElementsOfTypeFilter:
    """
    Allow selection of elements of one type only. Stateless.
    """

    def __init__(self, element_type: Any):
        self.element_type = element_type

    def accepts(self, element: Any) -> bool:
        return matches_type(element, self.element_type)

    def __call__(self, element: Any) -> bool:
        return self.accepts(element)

    def __repr__(self) -> str:
        tag = getattr(self.element_type, "__name__", self.element_type)
        return f"ElementsOfTypeFilter({tag!r})"
