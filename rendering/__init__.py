"""
Rendering module - star entities, the star field and drawing surfaces.
"""

from .surface import DrawingSurface, PygameSurface
from .star import StarEntity
from .star_field import StarField

__all__ = ["DrawingSurface", "PygameSurface", "StarEntity", "StarField"]
