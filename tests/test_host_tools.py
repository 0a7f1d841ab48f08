"""
Tests for selection filters and the in-memory host.
"""

import pytest

from pair_picker.schemas.element import Element
from pair_picker.tools.host.memory_host import InMemoryHost
from pair_picker.tools.host.protocol import CANCELLED, HostSession
from pair_picker.tools.host.selection_filter import ElementsOfTypeFilter, matches_type


class TestSelectionFilter:
    def test_category_match_is_case_insensitive(self, walls):
        selection_filter = ElementsOfTypeFilter("wall")
        assert selection_filter.accepts(walls[0])
        assert selection_filter(walls[1])

    def test_rejects_other_categories(self, doors):
        assert not ElementsOfTypeFilter("Wall").accepts(doors[0])

    def test_rejects_none_and_untyped_objects(self):
        assert not matches_type(None, "Wall")
        assert not matches_type(object(), "Wall")

    def test_class_tag_uses_isinstance(self, walls):
        assert matches_type(walls[0], Element)
        assert not matches_type(walls[0], str)

    def test_repr_names_the_type(self):
        assert "Wall" in repr(ElementsOfTypeFilter("Wall"))
        assert "Element" in repr(ElementsOfTypeFilter(Element))


class TestCancelledSentinel:
    def test_singleton_and_falsy(self):
        assert type(CANCELLED)() is CANCELLED
        assert not CANCELLED
        assert repr(CANCELLED) == "CANCELLED"


class TestInMemoryHost:
    def test_is_host_session(self):
        assert isinstance(InMemoryHost(), HostSession)

    def test_query_filters_by_type(self, walls, doors):
        host = InMemoryHost(elements=walls + doors)
        assert host.query_all_elements_of_type("Door") == doors
        assert host.query_all_elements_of_type("Window") == []

    def test_selection_keeps_order(self, walls):
        host = InMemoryHost(elements=walls, selection=["WE", "WA"])
        assert host.get_current_selection() == [walls[4], walls[0]]

    def test_unknown_selection_rejected(self, walls):
        host = InMemoryHost(elements=walls)
        with pytest.raises(KeyError):
            host.select(["nope"])

    def test_duplicate_element_rejected(self, walls):
        host = InMemoryHost(elements=walls)
        with pytest.raises(ValueError):
            host.add_element(walls[0])

    def test_scripted_picks_skip_rejected_elements(self, walls, doors):
        host = InMemoryHost(elements=walls + doors, picks=["D1", "missing", "WC"])

        picked = host.prompt_pick_one(ElementsOfTypeFilter("Wall"), "pick")

        assert picked == walls[2]
        assert host.prompts == ["pick"]

    def test_none_pick_cancels(self, walls):
        host = InMemoryHost(elements=walls, picks=[None, "WA"])
        assert host.prompt_pick_one(ElementsOfTypeFilter("Wall"), "pick") is CANCELLED

    def test_exhausted_script_cancels(self, walls):
        host = InMemoryHost(elements=walls)
        host.queue_picks(["WA"])
        selection_filter = ElementsOfTypeFilter("Wall")

        assert host.prompt_pick_one(selection_filter, "first") == walls[0]
        assert host.prompt_pick_one(selection_filter, "second") is CANCELLED

    def test_describe(self, walls):
        assert InMemoryHost(elements=walls).describe() == "InMemoryHost(5 elements)"
