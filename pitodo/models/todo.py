"""
To-Do data model: the priority catalog and the immutable Todo record.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

RGB = Tuple[int, int, int]

TITLE_MAX_LENGTH = 20
DESCRIPTION_MIN_LENGTH = 5
DESCRIPTION_MAX_LENGTH = 40


class Priority(Enum):
    """
    Severity of a to-do item

    Each variant carries its display label, a base color, a darker shade
    used for the label chip, a symbolic icon name and the glyph drawn for it.
    """

    URGENT = (4, 'Urgent', (244, 67, 54), (198, 40, 40), 'priority_high', '!')
    HIGH = (3, 'High', (255, 152, 0), (239, 108, 0), 'star', '★')
    MEDIUM = (2, 'Medium', (255, 235, 59), (249, 168, 37), 'star_half', '☆')
    LOW = (1, 'Low', (76, 175, 80), (46, 125, 50), 'low_priority', '↓')

    def __init__(self, rank: int, title: str, color: RGB, shade: RGB, icon: str, glyph: str):
        self.rank = rank
        self.title = title
        self.color = color
        self.shade = shade
        self.icon = icon
        self.glyph = glyph

    def __lt__(self, other):
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank < other.rank

    @classmethod
    def labels(cls) -> List[str]:
        """Display labels in catalog order, for populating a selection control"""
        return [priority.title for priority in cls]

    @classmethod
    def by_label(cls, label: Optional[str]) -> Optional['Priority']:
        """
        Resolve a display label back to its variant

        Args:
            label: Display label, matched exactly

        Returns:
            Matching Priority, or None when nothing matches
        """
        for priority in cls:
            if priority.title == label:
                return priority
        return None

    @classmethod
    def lowest(cls) -> 'Priority':
        return min(cls, key=lambda p: p.rank)


@dataclass(frozen=True)
class Todo:
    """A single task. Edits produce a new Todo via dataclasses.replace."""

    title: str
    description: str
    priority: Priority


def dummy_todos() -> List[Todo]:
    """Fixture entries used when todo.seed_fixtures is enabled"""
    return [
        Todo(title='Buy groceries', description='Milk, eggs and bread', priority=Priority.MEDIUM),
        Todo(title='Finish homework', description='Math, science and english', priority=Priority.HIGH),
        Todo(title='Go for a run', description='5 km in the park', priority=Priority.LOW),
        Todo(title='Call mom', description='Wish her a happy birthday', priority=Priority.URGENT),
    ]
