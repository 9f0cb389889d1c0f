"""
List presenter: projects store contents into display records.
"""

from dataclasses import dataclass
from typing import Iterable, List

from pitodo.models.todo import RGB, Todo


@dataclass(frozen=True)
class TodoDisplayRecord:
    label: str
    description: str
    priority_label: str
    priority_color: RGB
    priority_icon: str

    def to_dict(self):
        return {
            'label': self.label,
            'description': self.description,
            'priority': self.priority_label,
            'color': '#%02x%02x%02x' % self.priority_color,
            'icon': self.priority_icon,
        }


class TodoListPresenter:
    """Pure projection of todos into rows; recomputed on every store change"""

    def present(self, todos: Iterable[Todo]) -> List[TodoDisplayRecord]:
        return [
            TodoDisplayRecord(
                label=todo.title,
                description=todo.description,
                priority_label=todo.priority.title,
                priority_color=todo.priority.color,
                priority_icon=todo.priority.icon,
            )
            for todo in todos
        ]
