"""Shared fixtures: a recording drawing surface and record factories."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from core.config import ChartConfig
from core.types import CatalogRecord, ViewState
from rendering.surface import DrawingSurface

CANVAS = (800, 600)


class RecordingSurface(DrawingSurface):
    """DrawingSurface that records every call instead of drawing."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def set_fill_color(self, r, g, b, a=255):
        self.calls.append(("fill", r, g, b, a))

    def set_fill_hsb(self, h, s, b):
        self.calls.append(("hsb", h, s, b))

    def draw_circle(self, x, y, diameter):
        self.calls.append(("circle", x, y, diameter))

    def draw_text(self, text, x, y):
        self.calls.append(("text", text, x, y))

    def circles(self):
        return [c for c in self.calls if c[0] == "circle"]


def make_record(id=1, ra=0.0, dist=100.0, mag=1.0, name=None, spectral=None,
                dec=0.0, absmag=0.0) -> CatalogRecord:
    return CatalogRecord(id=id, right_ascension=ra, declination=dec,
                         apparent_magnitude=mag, absolute_magnitude=absmag,
                         distance=dist, name=name, spectral_class=spectral)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def view():
    return ViewState()


@pytest.fixture
def config():
    return ChartConfig(canvas_width=CANVAS[0], canvas_height=CANVAS[1],
                       catalog_path=None)
