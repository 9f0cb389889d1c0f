"""
In-memory To-Do store.

Holds the session's Todo records in insertion order. Nothing is persisted;
the store lives as long as the home screen and is cleared on teardown.
"""

import logging
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from pitodo.models.todo import Todo


class TodoStore:
    """Ordered, insertion-ordered collection of Todo records"""

    def __init__(self, todos: Optional[Iterable[Todo]] = None):
        """
        Initialize the store

        Args:
            todos: Optional fixture entries to pre-seed the store with
        """
        self.logger = logging.getLogger(__name__)
        self._todos: List[Todo] = list(todos) if todos else []
        self._listeners: List[Callable[[], None]] = []

    def subscribe(self, callback: Callable[[], None]):
        """Register a callback invoked after every mutation"""
        self._listeners.append(callback)

    def unsubscribe(self, callback: Callable[[], None]):
        """Remove a previously registered callback; unknown callbacks are ignored"""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self):
        for callback in self._listeners:
            callback()

    def add(self, todo: Todo):
        """Append a todo; duplicates are allowed"""
        self._todos.append(todo)
        self.logger.debug(f"Added todo: {todo.title} ({len(self._todos)} total)")
        self._notify()

    def replace(self, index: int, todo: Todo):
        """
        Replace the entry at index with an edited copy

        Raises:
            IndexError: If index is outside the store
        """
        if not 0 <= index < len(self._todos):
            raise IndexError(f"No todo at index {index}")
        self._todos[index] = todo
        self.logger.debug(f"Replaced todo {index}: {todo.title}")
        self._notify()

    def all(self) -> Tuple[Todo, ...]:
        """Current ordered snapshot"""
        return tuple(self._todos)

    def clear(self):
        """Remove every entry"""
        self._todos.clear()
        self.logger.debug("Store cleared")
        self._notify()

    def __len__(self) -> int:
        return len(self._todos)

    def __iter__(self) -> Iterator[Todo]:
        return iter(self.all())
