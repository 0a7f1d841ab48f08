"""
Services built on top of host sessions.
"""

from .pair_picker import PairPicker

__all__ = ["PairPicker"]
