"""
In-memory reference host.

Holds a flat list of elements, a current selection and a queue of scripted
interactive picks. Useful for tests, demos and for replaying a recorded
session against the picker logic without a CAD application.
"""

import logging
from collections import deque
from typing import Any, Deque, Dict, Iterable, List, Optional

from ...schemas.element import Element
from .protocol import CANCELLED, HostSession
from .selection_filter import matches_type

logger = logging.getLogger(__name__)


class InMemoryHost(HostSession):
    """
    HostSession over plain Python lists.

    Scripted picks are element ids, or None to simulate the user pressing
    Escape. A scripted id the active filter rejects is skipped, the way a
    host UI ignores clicks on non-selectable elements. An exhausted script
    counts as a cancel.
    """

    def __init__(
        self,
        elements: Optional[Iterable[Element]] = None,
        selection: Optional[Iterable[str]] = None,
        picks: Optional[Iterable[Optional[str]]] = None,
    ):
        self._elements: List[Element] = list(elements or [])
        self._by_id: Dict[str, Element] = {e.element_id: e for e in self._elements}
        self._selection: List[str] = []
        self._picks: Deque[Optional[str]] = deque(picks or [])
        self.prompts: List[str] = []
        self.query_count = 0
        self.selection_reads = 0

        if selection:
            self.select(selection)

    @property
    def elements(self) -> List[Element]:
        return list(self._elements)

    def add_element(self, element: Element) -> None:
        if element.element_id in self._by_id:
            raise ValueError(f"Duplicate element id: {element.element_id}")
        self._elements.append(element)
        self._by_id[element.element_id] = element

    def get_element(self, element_id: str) -> Optional[Element]:
        return self._by_id.get(element_id)

    def select(self, element_ids: Iterable[str]) -> None:
        """Replace the current selection, preserving the given order."""
        ids = list(element_ids)
        unknown = [i for i in ids if i not in self._by_id]
        if unknown:
            raise KeyError(f"Unknown element ids in selection: {unknown}")
        self._selection = ids

    def queue_picks(self, picks: Iterable[Optional[str]]) -> None:
        self._picks.extend(picks)

    def query_all_elements_of_type(self, element_type: Any) -> List[Element]:
        self.query_count += 1
        return [e for e in self._elements if matches_type(e, element_type)]

    def get_current_selection(self) -> List[Element]:
        self.selection_reads += 1
        return [self._by_id[i] for i in self._selection]

    def prompt_pick_one(self, selection_filter: Any, prompt_text: str):
        self.prompts.append(prompt_text)
        logger.debug("Prompt: %s", prompt_text)

        while self._picks:
            element_id = self._picks.popleft()
            if element_id is None:
                return CANCELLED

            element = self._by_id.get(element_id)
            if element is not None and selection_filter.accepts(element):
                return element

            logger.debug("Ignoring non-selectable pick %s", element_id)

        return CANCELLED

    def describe(self) -> str:
        return f"InMemoryHost({len(self._elements)} elements)"
