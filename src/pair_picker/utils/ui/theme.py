"""
UI Theme configuration: colors and icons.
"""

from typing import Dict

THEME: Dict[str, str] = {
    # Outcomes
    "success": "#00ff88",  # Bright green
    "error": "#f85149",  # Red
    "warning": "#d29922",  # Yellow
    # Text Types
    "prompt": "#ffcc00",  # Gold
    "element": "#00ccff",  # Cyan
    "text": "#e6edf3",
    "muted": "#7d8590",
    # Prompt widgets
    "pointer": "#00ff88",
    "border": "#30363d",
}

ICONS: Dict[str, str] = {
    "success": "✓",
    "error": "✗",
    "warning": "⚠",
    "cancelled": "○",
    "pick": "❯",
    "bullet": "•",
}
