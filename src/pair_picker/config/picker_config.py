"""
Prompt and logging configuration for pair picking.

Values can be overridden from the environment (or a .env file):
- PAIR_PICKER_FIRST_PROMPT
- PAIR_PICKER_SECOND_PROMPT
- PAIR_PICKER_VERBOSE
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class PickerConfig:
    """
    Centralized configuration for PairPicker.
    """

    first_prompt: str = "Please pick first element."
    """Instruction shown for the first interactive pick"""

    second_prompt: str = "Please pick second element."
    """Instruction shown for the second interactive pick"""

    verbose: bool = False
    """Default for the CLI --verbose flag (pair_picker debug logs on stderr)"""


# Global instance
DEFAULT_PICKER_CONFIG = PickerConfig()


def get_picker_config() -> PickerConfig:
    """
    Get the picker configuration, applying environment overrides.

    Returns:
        PickerConfig built from defaults and PAIR_PICKER_* variables
    """
    first = os.getenv("PAIR_PICKER_FIRST_PROMPT")
    second = os.getenv("PAIR_PICKER_SECOND_PROMPT")
    verbose = os.getenv("PAIR_PICKER_VERBOSE")

    return create_custom_config(
        first_prompt=first or None,
        second_prompt=second or None,
        verbose=(verbose.strip().lower() in _TRUTHY) if verbose else None,
    )


def create_custom_config(
    first_prompt: Optional[str] = None,
    second_prompt: Optional[str] = None,
    verbose: Optional[bool] = None,
) -> PickerConfig:
    """
    Create a custom picker configuration.

    Args:
        first_prompt: Override first pick instruction
        second_prompt: Override second pick instruction
        verbose: Override verbose flag

    Returns:
        PickerConfig with custom values
    """
    config = PickerConfig()

    if first_prompt is not None:
        config.first_prompt = first_prompt
    if second_prompt is not None:
        config.second_prompt = second_prompt
    if verbose is not None:
        config.verbose = verbose

    return config
