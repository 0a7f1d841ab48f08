"""
Terminal host: serves a loaded document model and asks the user to pick
elements from an arrow-key menu.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from InquirerPy import inquirer
from InquirerPy.base.control import Choice
from rich.console import Console

from ...schemas.element import Element
from ...utils.ui import ICONS, THEME
from ...utils.ui.style import get_inquirer_style
from .memory_host import InMemoryHost
from .protocol import CANCELLED

logger = logging.getLogger(__name__)

_CANCEL_VALUE = "__cancel__"


class ConsoleHost(InMemoryHost):
    """
    Interactive HostSession for the terminal.

    Document queries and the pre-selection come from the in-memory model;
    prompt_pick_one blocks on an InquirerPy select list that only offers
    elements the filter accepts.
    """

    def __init__(
        self,
        console: Console,
        elements: Optional[Iterable[Element]] = None,
        selection: Optional[Iterable[str]] = None,
    ):
        super().__init__(elements=elements, selection=selection)
        self.console = console

    def prompt_pick_one(self, selection_filter: Any, prompt_text: str):
        self.prompts.append(prompt_text)
        candidates = [e for e in self.elements if selection_filter.accepts(e)]

        self.console.print()
        self.console.print(f"[bold {THEME['prompt']}]{ICONS['pick']} {prompt_text}[/]")

        if not candidates:
            self.console.print(f"[{THEME['warning']}]No selectable elements.[/]")
            return CANCELLED

        choices = [Choice(value=e.element_id, name=e.display_name()) for e in candidates]
        choices.append(Choice(value=_CANCEL_VALUE, name="Cancel"))

        try:
            choice = inquirer.select(
                message="Select element",
                choices=choices,
                pointer="›",
                style=get_inquirer_style(),
                qmark="",
                amark="✓",
                mandatory=False,
            ).execute()
        except (EOFError, KeyboardInterrupt):
            logger.debug("Pick interrupted")
            return CANCELLED

        if choice is None or choice == _CANCEL_VALUE:
            return CANCELLED

        return self.get_element(choice)

    def describe(self) -> str:
        return f"ConsoleHost({len(self.elements)} elements)"
