from typing import Dict
from .base import Theme
from .light import LightTheme
from .dark import DarkTheme

# Registry of available themes
_THEMES: Dict[str, Theme] = {
    "light": LightTheme(),
    "dark": DarkTheme(),
}


def get_theme(name: str = "light") -> Theme:
    """
    Get a theme by name

    Raises:
        ValueError: If no theme is registered under the name
    """
    theme = _THEMES.get((name or "light").lower())
    if theme is None:
        available = ", ".join(_THEMES.keys())
        raise ValueError(f"Unknown theme '{name}'. Available themes: {available}")
    return theme


__all__ = [
    "Theme",
    "LightTheme",
    "DarkTheme",
    "get_theme",
]
