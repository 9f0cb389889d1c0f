"""
Unit tests for the list presenter
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pitodo.apps.todo.presenter import TodoListPresenter
from pitodo.core.todo_store import TodoStore
from pitodo.models.todo import Priority, Todo, dummy_todos


def test_projection_fields():
    todo = Todo(title='Call mom', description='Wish her a happy birthday', priority=Priority.URGENT)
    record = TodoListPresenter().present([todo])[0]

    assert record.label == 'Call mom'
    assert record.description == 'Wish her a happy birthday'
    assert record.priority_label == 'Urgent'
    assert record.priority_color == Priority.URGENT.color
    assert record.priority_icon == 'priority_high'


def test_projection_is_idempotent():
    store = TodoStore(dummy_todos())
    presenter = TodoListPresenter()

    first = presenter.present(store.all())
    second = presenter.present(store.all())

    assert first == second
    assert len(store) == 4, "Presenting must not mutate the store"


def test_projection_keeps_order():
    store = TodoStore(dummy_todos())
    labels = [record.label for record in TodoListPresenter().present(store.all())]
    assert labels == [todo.title for todo in store.all()]


def test_record_to_dict():
    todo = Todo(title='Run', description='5 km in the park', priority=Priority.LOW)
    data = TodoListPresenter().present([todo])[0].to_dict()
    assert data == {
        'label': 'Run',
        'description': '5 km in the park',
        'priority': 'Low',
        'color': '#4caf50',
        'icon': 'low_priority',
    }


def test_empty_store():
    assert TodoListPresenter().present(TodoStore().all()) == []
