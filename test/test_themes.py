#!/usr/bin/env python3
"""Test theme lookups"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from linechart.themes import DarkTheme, LightTheme, get_theme


def test_builtin_themes():
    assert isinstance(get_theme("DARK"), DarkTheme)
    assert isinstance(get_theme("light"), LightTheme)
    assert get_theme("").name == "light"


def test_unknown_theme():
    with pytest.raises(ValueError, match="Available themes"):
        get_theme("sepia")
