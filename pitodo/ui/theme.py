"""
Application theme.

AppTheme is built once at startup and handed to every screen that draws.
It holds a light and a dark color scheme, a shared type scale and the
container style used for cards; the light/dark choice is read from the
brightness provider each time a scheme is requested.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from PIL import ImageFont

from pitodo.models.todo import RGB

FONT_DIR = "/usr/share/fonts/truetype/dejavu"


class Brightness(Enum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class ColorScheme:
    brightness: Brightness
    primary: RGB
    on_primary: RGB
    surface: RGB
    on_surface: RGB
    background: RGB
    outline: RGB
    error: RGB


@dataclass(frozen=True)
class TextStyle:
    size: int
    bold: bool = False


@dataclass(frozen=True)
class ContainerStyle:
    padding: int = 16
    border_radius: int = 8


def mix(color: RGB, other: RGB, amount: float) -> RGB:
    return tuple(int(round(c + (o - c) * amount)) for c, o in zip(color, other))


def create_color_scheme(brightness: Brightness, seed: RGB) -> ColorScheme:
    """
    Derive a color scheme from a seed color

    Light schemes keep the seed as primary on a near-white surface;
    dark schemes lighten the seed and sit on a near-black surface.
    """
    white, black = (255, 255, 255), (0, 0, 0)
    if brightness == Brightness.LIGHT:
        return ColorScheme(
            brightness=brightness,
            primary=seed,
            on_primary=white,
            surface=mix(seed, white, 0.95),
            on_surface=(28, 27, 31),
            background=white,
            outline=mix(seed, black, 0.4),
            error=(198, 40, 40),
        )
    return ColorScheme(
        brightness=brightness,
        primary=mix(seed, white, 0.45),
        on_primary=mix(seed, black, 0.7),
        surface=mix(seed, black, 0.85),
        on_surface=(230, 225, 229),
        background=(20, 18, 24),
        outline=mix(seed, white, 0.3),
        error=(242, 184, 181),
    )


TEXT_STYLES: Dict[str, TextStyle] = {
    'display_large': TextStyle(96),
    'headline_small': TextStyle(24),
    'title_large': TextStyle(20, bold=True),
    'title_medium': TextStyle(16),
    'body_large': TextStyle(16),
    'body_medium': TextStyle(14),
    'body_small': TextStyle(12),
    'label_large': TextStyle(14, bold=True),
}

LIGHT_SEED: RGB = (33, 150, 243)   # blue
DARK_SEED: RGB = (63, 81, 181)     # indigo


def system_brightness() -> Brightness:
    """Platform preference, taken from PITODO_COLOR_SCHEME (light by default)"""
    value = os.environ.get('PITODO_COLOR_SCHEME', 'light').strip().lower()
    return Brightness.DARK if value == 'dark' else Brightness.LIGHT


class AppTheme:
    """
    Immutable theme configuration injected into the UI
    """

    def __init__(
        self,
        light: Optional[ColorScheme] = None,
        dark: Optional[ColorScheme] = None,
        text_styles: Optional[Dict[str, TextStyle]] = None,
        container_style: Optional[ContainerStyle] = None,
        brightness_provider: Callable[[], Brightness] = system_brightness,
    ):
        """
        Initialize theme

        Args:
            light: Scheme used in light mode
            dark: Scheme used in dark mode
            text_styles: Type scale shared by both modes
            container_style: Padding and corner radius for themed containers
            brightness_provider: Callable returning the current Brightness
        """
        self.logger = logging.getLogger(__name__)
        self.light = light or create_color_scheme(Brightness.LIGHT, LIGHT_SEED)
        self.dark = dark or create_color_scheme(Brightness.DARK, DARK_SEED)
        self._text_styles = dict(text_styles or TEXT_STYLES)
        self.container_style = container_style or ContainerStyle()
        self._brightness_provider = brightness_provider
        self._fonts: Dict[Tuple[int, bool], ImageFont.ImageFont] = {}

    @classmethod
    def from_mode(cls, mode: str = 'system') -> 'AppTheme':
        """
        Build a theme for a configured mode

        Args:
            mode: 'system', 'light' or 'dark'
        """
        mode = (mode or 'system').lower()
        if mode == 'light':
            return cls(brightness_provider=lambda: Brightness.LIGHT)
        if mode == 'dark':
            return cls(brightness_provider=lambda: Brightness.DARK)
        return cls()

    def current_color_scheme(self) -> ColorScheme:
        if self._brightness_provider() == Brightness.DARK:
            return self.dark
        return self.light

    def current_text_styles(self) -> Dict[str, TextStyle]:
        return dict(self._text_styles)

    def font(self, style_name: str):
        """
        Load the font for a named text style

        Falls back to Pillow's default font when DejaVu is not installed.
        """
        style = self._text_styles.get(style_name, self._text_styles['body_medium'])
        key = (style.size, style.bold)
        if key not in self._fonts:
            filename = "DejaVuSans-Bold.ttf" if style.bold else "DejaVuSans.ttf"
            try:
                self._fonts[key] = ImageFont.truetype(os.path.join(FONT_DIR, filename), style.size)
            except OSError:
                self.logger.warning("TrueType fonts not found, using default")
                self._fonts[key] = ImageFont.load_default()
        return self._fonts[key]
