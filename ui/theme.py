"""
UI Theme - Night Chart Style

Colors and fonts for the chart overlay and control strip.
Black sky, gray overlay text, muted blue controls.
"""

import pygame
from typing import Tuple
from dataclasses import dataclass


class Colors:
    """Chart color palette"""

    # Background colors
    BG_PANEL = (12, 14, 22)
    BG_INPUT = (24, 28, 40)

    # Foreground colors
    FG_TEXT = (128, 128, 128)     # Overlay text
    FG_LABEL = (170, 175, 190)    # Widget labels
    FG_DIM = (90, 95, 110)

    # Controls
    TRACK = (50, 56, 76)
    KNOB = (120, 160, 230)
    KNOB_ACTIVE = (170, 205, 255)
    CHECK = (120, 200, 255)
    BORDER = (70, 78, 100)


@dataclass
class FontConfig:
    """Font configuration"""
    family: str = "Verdana"
    size_overlay: int = 10
    size_small: int = 13
    size_normal: int = 15


class Fonts:
    """
    Font manager

    Fonts are created on first use, so headless code that never draws
    text does not need pygame.font.
    """

    _initialized = False
    _fonts: dict = {}
    _config = FontConfig()

    @classmethod
    def initialize(cls, config: FontConfig = None):
        if config is not None:
            cls._config = config

        pygame.font.init()

        sizes = {
            'overlay': cls._config.size_overlay,
            'small': cls._config.size_small,
            'normal': cls._config.size_normal,
        }
        for family in (cls._config.family, "DejaVu Sans", "Arial"):
            if pygame.font.match_font(family):
                for key, size in sizes.items():
                    cls._fonts[key] = pygame.font.SysFont(family, size)
                break
        else:
            # pygame's bundled default font
            for key, size in sizes.items():
                cls._fonts[key] = pygame.font.Font(None, size + 4)

        cls._initialized = True

    @classmethod
    def get(cls, size: str = 'normal') -> pygame.font.Font:
        if not cls._initialized:
            cls.initialize()
        return cls._fonts.get(size, cls._fonts['normal'])

    @classmethod
    def overlay(cls) -> pygame.font.Font:
        return cls.get('overlay')

    @classmethod
    def small(cls) -> pygame.font.Font:
        return cls.get('small')

    @classmethod
    def normal(cls) -> pygame.font.Font:
        return cls.get('normal')


class Theme:
    """Colors, fonts and spacing bundled together"""

    def __init__(self):
        self.colors = Colors()
        self.fonts = Fonts()

        self.line_height = 10     # overlay text rows
        self.widget_spacing = 28

    def draw_text(self, surface: pygame.Surface, font: pygame.font.Font,
                  x: int, y: int, text: str, color: Tuple[int, int, int],
                  align: str = 'left'):
        """
        Draw text

        Args:
            surface: Target surface
            font: Font to use
            x, y: Position
            text: Text to render
            color: Text color
            align: 'left', 'center', or 'right'
        """
        rendered = font.render(text, True, color)

        if align == 'center':
            x -= rendered.get_width() // 2
        elif align == 'right':
            x -= rendered.get_width()

        surface.blit(rendered, (x, y))


_theme = None

def get_theme() -> Theme:
    """Get global theme instance"""
    global _theme
    if _theme is None:
        _theme = Theme()
    return _theme
