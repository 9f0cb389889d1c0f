"""
Error screen for PiTodo
Mounted instead of the home screen when initialization fails
"""

from typing import List

from PIL import Image, ImageDraw

from pitodo.ui.theme import AppTheme

DEFAULT_MESSAGE = (
    "An error occurred during initialization. "
    "Please check the logs and restart the app."
)


class ErrorScreen:
    """
    Full-screen initialization failure message
    """

    def __init__(self, theme: AppTheme, width: int = 800, height: int = 480, detail: str = ""):
        """
        Initialize error screen

        Args:
            theme: Application theme
            width: Screen width
            height: Screen height
            detail: Failure message shown under the generic notice
        """
        self.theme = theme
        self.width = width
        self.height = height
        self.message = DEFAULT_MESSAGE
        self.detail = detail

    def _wrap(self, draw: ImageDraw.ImageDraw, text: str, font, max_width: int) -> List[str]:
        lines: List[str] = []
        current: List[str] = []
        for word in text.split():
            candidate = ' '.join(current + [word])
            bbox = draw.textbbox((0, 0), candidate, font=font)
            if bbox[2] - bbox[0] <= max_width or not current:
                current.append(word)
            else:
                lines.append(' '.join(current))
                current = [word]
        if current:
            lines.append(' '.join(current))
        return lines

    def render(self) -> Image.Image:
        """
        Render error screen

        Returns:
            PIL Image with the centered, wrapped message
        """
        scheme = self.theme.current_color_scheme()
        image = Image.new('RGB', (self.width, self.height), scheme.background)
        draw = ImageDraw.Draw(image)

        font = self.theme.font('title_medium')
        detail_font = self.theme.font('body_small')
        max_width = self.width - 2 * self.theme.container_style.padding * 2

        blocks = [(line, font, scheme.error) for line in self._wrap(draw, self.message, font, max_width)]
        if self.detail:
            blocks += [(line, detail_font, scheme.on_surface)
                       for line in self._wrap(draw, self.detail, detail_font, max_width)]

        line_height = 26
        y = (self.height - line_height * len(blocks)) // 2
        for text, line_font, color in blocks:
            bbox = draw.textbbox((0, 0), text, font=line_font)
            x = (self.width - (bbox[2] - bbox[0])) // 2
            draw.text((x, y), text, font=line_font, fill=color)
            y += line_height

        return image
