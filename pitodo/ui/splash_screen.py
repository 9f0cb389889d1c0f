"""
Splash screen for PiTodo
Held on the display while the application bootstraps
"""

import logging

from PIL import Image, ImageDraw

from pitodo.ui.theme import AppTheme


class SplashScreen:
    """
    Startup frame showing the application title
    """

    def __init__(self, theme: AppTheme, width: int = 800, height: int = 480, title: str = "Todo App"):
        self.theme = theme
        self.width = width
        self.height = height
        self.title = title

    def render(self) -> Image.Image:
        scheme = self.theme.current_color_scheme()
        image = Image.new('RGB', (self.width, self.height), scheme.primary)
        draw = ImageDraw.Draw(image)
        font = self.theme.font('headline_small')

        bbox = draw.textbbox((0, 0), self.title, font=font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        x = (self.width - text_width) // 2
        y = (self.height - text_height) // 2
        draw.text((x, y), self.title, font=font, fill=scheme.on_primary)

        return image


class SplashController:
    """
    Preserve/release bracket around bootstrap

    preserve() pushes the splash frame to the display so no blank frame is
    shown; release() marks it as removable. Each may be called once.
    """

    def __init__(self, display, splash: SplashScreen):
        """
        Args:
            display: DisplayDriver receiving the splash frame
            splash: Screen to show while preserved
        """
        self.display = display
        self.splash = splash
        self.preserved = False
        self.released = False
        self.logger = logging.getLogger(__name__)

    def preserve(self):
        if self.preserved:
            raise RuntimeError("Splash already preserved")
        self.preserved = True
        self.display.display_image(self.splash.render())
        self.logger.debug("Splash preserved")

    def release(self):
        if self.released:
            raise RuntimeError("Splash already released")
        self.released = True
        self.logger.debug("Splash released")
