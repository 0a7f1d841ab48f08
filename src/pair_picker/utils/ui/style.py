"""
Shared styling for interactive pick prompts.
"""

from __future__ import annotations

from typing import Dict

from InquirerPy.utils import InquirerPyStyle

from .theme import THEME


def get_inquirer_style() -> InquirerPyStyle:
    """
    Build and return the InquirerPy style used by pick prompts.

    Returns:
        InquirerPyStyle instance.
    """
    style_dict: Dict[str, str] = {
        "questionmark": THEME["warning"],
        "answermark": THEME["success"],
        "answer": THEME["element"],
        "question": THEME["prompt"],
        "answered_question": THEME["muted"],
        "instruction": THEME["muted"],
        "pointer": f"{THEME['pointer']} bold",
        "separator": THEME["border"],
        "skipped": THEME["muted"],
    }
    return InquirerPyStyle(style_dict)
