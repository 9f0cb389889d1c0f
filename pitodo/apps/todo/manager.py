"""
To-Do List Manager

Owns the session's store, form controller and presenter, and refreshes
the home screen whenever the store changes.
"""

import logging
from typing import List, Optional

from pitodo.apps.todo.form import TodoFormController
from pitodo.apps.todo.presenter import TodoDisplayRecord, TodoListPresenter
from pitodo.core.todo_store import TodoStore
from pitodo.models.todo import Todo


class TodoManager:
    """Session state for the To-Do home screen"""

    def __init__(self, app_instance=None, fixtures: Optional[List[Todo]] = None):
        """
        Initialize TodoManager

        Args:
            app_instance: Reference to the main app (for screen refresh)
            fixtures: Entries to pre-seed the store with
        """
        self.app_instance = app_instance
        self.logger = logging.getLogger(__name__)
        self.store = TodoStore(fixtures)
        self.form = TodoFormController(self.store)
        self.presenter = TodoListPresenter()
        self.store.subscribe(self.refresh_screen)

        if fixtures:
            self.logger.info(f"Seeded {len(fixtures)} todos")

    def records(self) -> List[TodoDisplayRecord]:
        """Display records for the current store contents"""
        return self.presenter.present(self.store.all())

    def refresh_screen(self) -> bool:
        """
        Re-render the home screen if it is mounted

        Returns:
            True if a frame was rendered, False otherwise
        """
        if not self.app_instance:
            return False

        from pitodo.ui.navigation import Screen

        if self.app_instance.navigation.is_on_screen(Screen.HOME):
            self.app_instance.render_current_screen()
            self.logger.debug("Refreshed To-Do screen")
            return True

        self.logger.debug("Not on To-Do screen, skipping refresh")
        return False

    def teardown(self):
        """Drop all todos when the screen goes away"""
        # Shutdown runs off the interaction thread: no re-render from here
        self.store.unsubscribe(self.refresh_screen)
        count = len(self.store)
        self.store.clear()
        self.logger.info(f"Cleared {count} todos")
