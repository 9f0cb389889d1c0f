"""
To-Do home screen.
Renders the app bar, the creation form and one card per todo with Pillow.
"""

import logging
from typing import List, Optional

from PIL import Image, ImageDraw

from pitodo.apps.todo.form import FormState
from pitodo.apps.todo.presenter import TodoDisplayRecord
from pitodo.models.todo import Priority
from pitodo.ui.theme import AppTheme, mix

APP_BAR_HEIGHT = 48
FORM_HEIGHT = 96
CARD_HEIGHT = 72
CARD_GAP = 8
CHIP_WIDTH = 90


class ToDoScreen:
    """
    Home screen: creation form on top, todo list below
    """

    def __init__(self, theme: AppTheme, width: int = 800, height: int = 480, title: str = "Todo App"):
        """
        Initialize To Do screen

        Args:
            theme: Application theme
            width: Screen width
            height: Screen height
            title: App bar title
        """
        self.theme = theme
        self.width = width
        self.height = height
        self.title = title
        self.logger = logging.getLogger(__name__)

    def _draw_app_bar(self, draw: ImageDraw.ImageDraw, scheme):
        font = self.theme.font('title_large')
        bbox = draw.textbbox((0, 0), self.title, font=font)
        x = (self.width - (bbox[2] - bbox[0])) // 2
        y = (APP_BAR_HEIGHT - (bbox[3] - bbox[1])) // 2
        draw.text((x, y), self.title, font=font, fill=scheme.primary)
        draw.line([(10, APP_BAR_HEIGHT), (self.width - 10, APP_BAR_HEIGHT)], fill=scheme.outline, width=1)

    def _draw_field(self, draw, x: int, y: int, width: int, label: str, value: str, error: Optional[str], scheme):
        label_font = self.theme.font('body_small')
        value_font = self.theme.font('body_medium')
        outline = scheme.error if error else scheme.outline

        draw.text((x, y), label, font=label_font, fill=scheme.on_surface)
        draw.rounded_rectangle(
            [(x, y + 16), (x + width, y + 44)],
            radius=4,
            outline=outline,
            width=1,
        )
        draw.text((x + 6, y + 22), value, font=value_font, fill=scheme.on_surface)
        if error:
            draw.text((x, y + 48), error, font=label_font, fill=scheme.error)

    def _draw_form(self, draw: ImageDraw.ImageDraw, form: FormState, scheme, top: int):
        padding = self.theme.container_style.padding
        usable = self.width - 2 * padding
        title_width = usable * 3 // 10
        description_width = usable * 5 // 10
        priority_width = usable - title_width - description_width - 2 * padding

        x = padding
        self._draw_field(draw, x, top, title_width, "Title", form.title, form.error_for('title'), scheme)
        x += title_width + padding
        self._draw_field(draw, x, top, description_width, "Description", form.description,
                         form.error_for('description'), scheme)
        x += description_width + padding
        self._draw_field(draw, x, top, priority_width, "Priority", form.priority_label,
                         form.error_for('priority'), scheme)

    def _draw_card(self, draw: ImageDraw.ImageDraw, record: TodoDisplayRecord, scheme, top: int):
        padding = self.theme.container_style.padding
        radius = self.theme.container_style.border_radius
        left, right = padding // 2, self.width - padding // 2
        bottom = top + CARD_HEIGHT

        # Priority color at 50% opacity over the background
        fill = mix(record.priority_color, scheme.background, 0.5)
        draw.rounded_rectangle([(left, top), (right, bottom)], radius=radius, fill=fill)

        priority = Priority.by_label(record.priority_label)
        glyph = priority.glyph if priority else '?'
        draw.text((left + 8, top + 22), glyph, font=self.theme.font('headline_small'), fill=scheme.on_surface)

        text_x = left + 44
        draw.text((text_x, top + 10), record.label, font=self.theme.font('title_large'), fill=(0, 0, 0))
        draw.text((text_x, top + 40), record.description, font=self.theme.font('body_large'), fill=(0, 0, 0))

        chip_left = right - CHIP_WIDTH
        chip_color = priority.shade if priority else record.priority_color
        draw.rounded_rectangle([(chip_left, top), (right, bottom)], radius=radius, fill=chip_color)
        chip_font = self.theme.font('title_medium')
        bbox = draw.textbbox((0, 0), record.priority_label, font=chip_font)
        chip_x = chip_left + (CHIP_WIDTH - (bbox[2] - bbox[0])) // 2
        chip_y = top + (CARD_HEIGHT - (bbox[3] - bbox[1])) // 2
        draw.text((chip_x, chip_y), record.priority_label, font=chip_font, fill=(0, 0, 0))

    def render(self, records: List[TodoDisplayRecord], form: Optional[FormState] = None) -> Image.Image:
        """
        Render the To Do screen

        Args:
            records: Display records from the list presenter
            form: Current creation form state

        Returns:
            PIL Image of the screen
        """
        scheme = self.theme.current_color_scheme()
        image = Image.new('RGB', (self.width, self.height), scheme.background)
        draw = ImageDraw.Draw(image)

        self._draw_app_bar(draw, scheme)
        self._draw_form(draw, form or FormState(), scheme, APP_BAR_HEIGHT + 8)

        y_offset = APP_BAR_HEIGHT + FORM_HEIGHT
        if not records:
            msg = "No tasks yet"
            font = self.theme.font('body_large')
            bbox = draw.textbbox((0, 0), msg, font=font)
            draw.text(((self.width - (bbox[2] - bbox[0])) // 2, (y_offset + self.height) // 2),
                      msg, font=font, fill=scheme.outline)
            return image

        drawn = 0
        for record in records:
            if y_offset + CARD_HEIGHT > self.height:
                break
            self._draw_card(draw, record, scheme, y_offset)
            y_offset += CARD_HEIGHT + CARD_GAP
            drawn += 1

        if drawn < len(records):
            self.logger.debug(f"{len(records) - drawn} todos below the fold")

        return image
