"""
Navigation state for the root UI.
"""

from enum import Enum
from typing import Optional
import logging


class Screen(Enum):
    """Root screens the application can mount"""
    SPLASH = "splash"
    HOME = "home"
    ERROR = "error"


class NavigationManager:
    """
    Track which root screen is mounted
    """

    def __init__(self, initial_screen: Screen = Screen.SPLASH):
        """
        Initialize navigation manager

        Args:
            initial_screen: Starting screen
        """
        self.logger = logging.getLogger(__name__)
        self.current_screen = initial_screen
        self.previous_screen: Optional[Screen] = None

        self.logger.info(f"Navigation initialized at {self.current_screen.value}")

    def navigate_to(self, screen: Screen):
        """
        Mount a new root screen

        Args:
            screen: Target screen
        """
        self.previous_screen = self.current_screen
        self.current_screen = screen
        self.logger.info(f"Navigated from {self.previous_screen.value} to {self.current_screen.value}")

    def is_on_screen(self, screen: Screen) -> bool:
        """
        Check if currently on a specific screen

        Args:
            screen: Screen to check

        Returns:
            True if on specified screen
        """
        return self.current_screen == screen
