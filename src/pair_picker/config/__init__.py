"""
Configuration module for prompt texts and verbosity.
"""

from .picker_config import (
    DEFAULT_PICKER_CONFIG,
    PickerConfig,
    create_custom_config,
    get_picker_config,
)

__all__ = [
    "DEFAULT_PICKER_CONFIG",
    "PickerConfig",
    "create_custom_config",
    "get_picker_config",
]
