"""
Drawing Surface

The small set of primitives the star field draws with, plus the
pygame implementation used by the application.
"""

import pygame
from abc import ABC, abstractmethod
from typing import Optional, Tuple

BACKGROUND = (0, 0, 0)
TEXT_COLOR = (128, 128, 128)


class DrawingSurface(ABC):
    """
    Primitive drawing calls

    Fill state is sticky: set_fill_* applies to every following
    draw_circle until changed.
    """

    @abstractmethod
    def clear(self):
        pass

    @abstractmethod
    def set_fill_color(self, r: float, g: float, b: float, a: float = 255):
        pass

    @abstractmethod
    def set_fill_hsb(self, h: float, s: float, b: float):
        """Hue in degrees, saturation and brightness in 0..100."""
        pass

    @abstractmethod
    def draw_circle(self, x: float, y: float, diameter: float):
        pass

    @abstractmethod
    def draw_text(self, text: str, x: float, y: float):
        pass


def _channel(v: float) -> int:
    return max(0, min(255, int(round(v))))


def _percent(v: float) -> float:
    return max(0.0, min(100.0, float(v)))


class PygameSurface(DrawingSurface):
    """DrawingSurface backed by a pygame.Surface"""

    def __init__(self, surface: pygame.Surface,
                 font: Optional[pygame.font.Font] = None,
                 text_color: Tuple[int, int, int] = TEXT_COLOR):
        self.surface = surface
        self.font = font
        self.text_color = text_color
        self.fill = pygame.Color(255, 255, 255, 255)

    @property
    def size(self) -> Tuple[int, int]:
        return self.surface.get_size()

    def clear(self):
        self.surface.fill(BACKGROUND)

    def set_fill_color(self, r, g, b, a=255):
        self.fill = pygame.Color(_channel(r), _channel(g), _channel(b), _channel(a))

    def set_fill_hsb(self, h, s, b):
        color = pygame.Color(0, 0, 0)
        color.hsva = (float(h) % 360, _percent(s), _percent(b), 100)
        self.fill = color

    def draw_circle(self, x, y, diameter):
        cx, cy = int(round(x)), int(round(y))
        if diameter <= 1:
            # pygame draws nothing for a sub-pixel radius
            if 0 <= cx < self.surface.get_width() and 0 <= cy < self.surface.get_height():
                self.surface.set_at((cx, cy), self.fill)
            return
        pygame.draw.circle(self.surface, self.fill, (cx, cy), diameter / 2)

    def draw_text(self, text, x, y):
        if self.font is None:
            return
        rendered = self.font.render(text, True, self.text_color)
        self.surface.blit(rendered, (int(x), int(y)))
