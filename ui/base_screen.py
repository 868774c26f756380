"""
Base Screen Class

Abstract base class for application screens.
"""

import pygame
from abc import ABC, abstractmethod
from typing import Optional
from .theme import get_theme


class BaseScreen(ABC):
    """
    Abstract base class for all screens

    The application loop calls handle_input, update and render once per
    frame, in that order.
    """

    def __init__(self, screen_name: str):
        """
        Initialize base screen

        Args:
            screen_name: Unique identifier for this screen
        """
        self.screen_name = screen_name
        self.active = False
        self.theme = get_theme()

    def on_enter(self):
        """Called when screen becomes active"""
        self.active = True

    def on_exit(self):
        """Called when screen becomes inactive"""
        self.active = False

    @abstractmethod
    def handle_input(self, events: list[pygame.event.Event]) -> Optional[str]:
        """
        Handle input events

        Args:
            events: List of pygame events for this frame

        Returns:
            "QUIT" to stop the application, or None to keep running
        """
        pass

    @abstractmethod
    def update(self, dt: float):
        """
        Update screen logic

        Args:
            dt: Delta time in seconds since last update
        """
        pass

    @abstractmethod
    def render(self, surface: pygame.Surface):
        """
        Render screen

        Args:
            surface: Main display surface to render to
        """
        pass

    def is_active(self) -> bool:
        return self.active
