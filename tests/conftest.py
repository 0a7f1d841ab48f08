"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path

import pytest


def pytest_configure(config):
    """Configure pytest."""
    # Add src to path
    src_path = Path(__file__).parent.parent / "src"
    sys.path.insert(0, str(src_path))

    config.addinivalue_line("markers", "interactive: exercises interactive picking")
    config.addinivalue_line("markers", "preselection: exercises pre-selection handling")


def pytest_collection_modifyitems(config, items):
    """
    Modify test items to add helpful markers.
    """
    for item in items:
        if "interactive" in item.nodeid.lower():
            item.add_marker("interactive")
        if "preselect" in item.nodeid.lower():
            item.add_marker("preselection")


@pytest.fixture
def walls():
    """Five walls A-E."""
    from pair_picker.schemas.element import Element

    return [
        Element(element_id=f"W{letter}", category="Wall", name=f"Wall {letter}")
        for letter in "ABCDE"
    ]


@pytest.fixture
def doors():
    """Two doors."""
    from pair_picker.schemas.element import Element

    return [
        Element(element_id="D1", category="Door", name="Front door"),
        Element(element_id="D2", category="Door", name="Back door"),
    ]


@pytest.fixture
def picker_config():
    """Config with default prompts, independent of the environment."""
    from pair_picker.config.picker_config import PickerConfig

    return PickerConfig()
