"""
Terminal presentation helpers.
"""

from rich.console import Console

from .theme import ICONS, THEME

console = Console()

__all__ = ["console", "THEME", "ICONS"]
