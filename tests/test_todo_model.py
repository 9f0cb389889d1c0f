"""
Unit tests for the priority catalog and the Todo record
"""

import sys
from dataclasses import FrozenInstanceError, replace
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pitodo.models.todo import Priority, Todo, dummy_todos


def test_exactly_four_priorities():
    """The catalog is a closed set of four variants"""
    assert len(list(Priority)) == 4
    assert Priority.labels() == ['Urgent', 'High', 'Medium', 'Low']


def test_priorities_ordered_by_severity():
    assert Priority.URGENT > Priority.HIGH > Priority.MEDIUM > Priority.LOW
    assert sorted(Priority) == [Priority.LOW, Priority.MEDIUM, Priority.HIGH, Priority.URGENT]
    assert Priority.lowest() is Priority.LOW


def test_by_label_resolves_exact_match():
    for priority in Priority:
        assert Priority.by_label(priority.title) is priority


def test_by_label_unknown_returns_none():
    """No silent fallback to another severity"""
    assert Priority.by_label('low') is None
    assert Priority.by_label('Critical') is None
    assert Priority.by_label('') is None
    assert Priority.by_label(None) is None


def test_priority_colors_are_rgb():
    for priority in Priority:
        for color in (priority.color, priority.shade):
            assert len(color) == 3
            assert all(isinstance(c, int) and 0 <= c <= 255 for c in color)
        assert priority.icon
        assert priority.glyph


def test_todo_is_immutable():
    todo = Todo(title='Call mom', description='Birthday call', priority=Priority.URGENT)
    with pytest.raises(FrozenInstanceError):
        todo.title = 'Call dad'

    edited = replace(todo, title='Call dad')
    assert edited.title == 'Call dad'
    assert todo.title == 'Call mom'


def test_dummy_todos_cover_every_priority():
    fixtures = dummy_todos()
    assert {todo.priority for todo in fixtures} == set(Priority)
    assert fixtures[0].title == 'Buy groceries'
