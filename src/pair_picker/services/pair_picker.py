"""
Pick a pair of elements of a specific type.

If exactly two exist in the entire model, take them. If there are fewer
than two, give up. If at least two have been pre-selected, use the first
two. Otherwise, prompt for interactive picking.
"""

import logging
from typing import Any, Generic, List, Optional, TypeVar

from ..config.picker_config import PickerConfig, get_picker_config
from ..errors import HostConfigurationError
from ..schemas.element import IdentifiableElement
from ..schemas.pick_result import PairResult, PickSource
from ..tools.host.protocol import CANCELLED
from ..tools.host.selection_filter import ElementsOfTypeFilter, matches_type

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=IdentifiableElement)

_HOST_OPERATIONS = (
    "query_all_elements_of_type",
    "get_current_selection",
    "prompt_pick_one",
)


class PairPicker(Generic[T]):
    """
    Obtain exactly two elements of one type from a host session.

    All working state is local to pick(). ``selected`` holds the elements
    of the most recent pick: the pair after a success, empty otherwise.
    """

    def __init__(
        self,
        host: Any,
        element_type: Any,
        config: Optional[PickerConfig] = None,
    ):
        """
        Bind to a host session. No host calls are made here.

        Args:
            host: HostSession (or any object with the same three methods)
            element_type: Class or category string the pair must match
            config: Prompt configuration, defaults to get_picker_config()
        """
        if host is None:
            raise HostConfigurationError("PairPicker requires a host session")

        missing = [
            name for name in _HOST_OPERATIONS if not callable(getattr(host, name, None))
        ]
        if missing:
            raise HostConfigurationError(
                f"Host {type(host).__name__} is missing operations: {missing}"
            )

        if element_type is None:
            raise HostConfigurationError("PairPicker requires an element type")

        self.host = host
        self.element_type = element_type
        self.config = config or get_picker_config()
        self._selected: List[T] = []

    @property
    def selected(self) -> List[T]:
        """Elements of the most recent pick, empty unless it succeeded."""
        return list(self._selected)

    def pick(self) -> PairResult:
        """
        Run the decision tree once.

        Returns:
            PairResult with outcome SUCCESS, INSUFFICIENT_ELEMENTS, CANCELLED
            or INTERNAL_INCONSISTENCY
        """
        self._selected = []

        candidates = self._as_list(
            self.host.query_all_elements_of_type(self.element_type),
            "query_all_elements_of_type",
        )
        n = len(candidates)
        logger.debug(
            "%d elements of type %s in %s", n, self._type_name(), self._host_name()
        )

        if n < 2:
            return PairResult.insufficient()

        if n == 2:
            return self._succeed(candidates[0], candidates[1], PickSource.ONLY_TWO)

        result = self._from_preselection()
        if result is not None:
            return result

        return self._pick_interactively()

    def _from_preselection(self) -> Optional[PairResult]:
        selection = self._as_list(
            self.host.get_current_selection(), "get_current_selection"
        )
        logger.debug("%d pre-selected elements", len(selection))

        pair: List[T] = []
        for element in selection:
            if matches_type(element, self.element_type):
                pair.append(element)
                if len(pair) == 2:
                    break

        if len(pair) < 2:
            return None

        ignored = len(selection) - 2
        if ignored:
            logger.debug(
                "Found two pre-selected elements of type %s, ignoring %d others",
                self._type_name(),
                ignored,
            )
        return self._succeed(pair[0], pair[1], PickSource.PRESELECTION, ignored)

    def _pick_interactively(self) -> PairResult:
        picks: List[T] = []

        for prompt_text in (self.config.first_prompt, self.config.second_prompt):
            selection_filter = ElementsOfTypeFilter(self.element_type)
            element = self.host.prompt_pick_one(selection_filter, prompt_text)

            if element is CANCELLED or element is None:
                logger.debug("Interactive pick cancelled after %d picks", len(picks))
                return PairResult.cancelled()

            if not selection_filter.accepts(element):
                message = (
                    f"Picked element {getattr(element, 'element_id', element)!r} "
                    f"is not of type {self._type_name()}"
                )
                logger.error(message)
                return PairResult.inconsistent(message)

            picks.append(element)

        return self._succeed(picks[0], picks[1], PickSource.INTERACTIVE)

    def _succeed(
        self, first: T, second: T, source: PickSource, ignored: int = 0
    ) -> PairResult:
        self._selected = [first, second]
        return PairResult.success(first, second, source, ignored)

    def _as_list(self, value: Any, operation: str) -> List[Any]:
        if value is None or isinstance(value, (str, bytes)):
            raise HostConfigurationError(
                f"Host {operation}() returned {type(value).__name__}, expected a sequence"
            )
        try:
            return list(value)
        except TypeError as e:
            raise HostConfigurationError(
                f"Host {operation}() returned {type(value).__name__}, expected a sequence"
            ) from e

    def _host_name(self) -> str:
        describe = getattr(self.host, "describe", None)
        if callable(describe):
            return str(describe())
        return type(self.host).__name__

    def _type_name(self) -> str:
        return getattr(self.element_type, "__name__", str(self.element_type))
