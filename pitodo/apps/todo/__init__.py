"""
To-Do List App Module

Provides the To-Do home screen for PiTodo including:
- TodoManager: Session store, form controller and screen refresh
- TodoFormController: Creation form validation
- TodoListPresenter: Display records for the list
- ToDoScreen: Rendered home screen
- Flask Blueprint: REST API routes
"""

from .manager import TodoManager
from .form import TodoFormController
from .presenter import TodoListPresenter
from .screen import ToDoScreen
from .routes import todo_bp, init_routes

__all__ = ['TodoManager', 'TodoFormController', 'TodoListPresenter', 'ToDoScreen', 'todo_bp', 'init_routes']
