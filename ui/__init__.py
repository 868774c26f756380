"""
UI Module - Chart screen, controls and theme
"""
from .theme import get_theme, Colors, Fonts
from .base_screen import BaseScreen
from .components import Slider, Checkbox
from .screen_starchart import StarChartScreen

__all__ = [
    "get_theme", "Colors", "Fonts",
    "BaseScreen",
    "Slider", "Checkbox",
    "StarChartScreen",
]
