"""
Unit tests for the in-memory todo store
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pitodo.core.todo_store import TodoStore
from pitodo.models.todo import Priority, Todo


def _todo(title, priority=Priority.MEDIUM):
    return Todo(title=title, description='Some details', priority=priority)


def test_insertion_order_preserved():
    store = TodoStore()
    a, b, c = _todo('A'), _todo('B'), _todo('C')
    store.add(a)
    store.add(b)
    store.add(c)

    assert store.all() == (a, b, c)
    assert len(store) == 3
    assert list(store) == [a, b, c]


def test_duplicates_permitted():
    store = TodoStore()
    store.add(_todo('Same'))
    store.add(_todo('Same'))
    assert len(store) == 2


def test_snapshot_is_read_only():
    store = TodoStore()
    store.add(_todo('A'))
    snapshot = store.all()
    assert isinstance(snapshot, tuple)

    store.add(_todo('B'))
    assert len(snapshot) == 1, "Earlier snapshot must not change"


def test_clear_empties_store():
    store = TodoStore([_todo('A'), _todo('B')])
    assert len(store) == 2
    store.clear()
    assert len(store) == 0
    assert store.all() == ()


def test_replace_entry_at_index():
    store = TodoStore([_todo('A'), _todo('B')])
    edited = _todo('B2', Priority.URGENT)
    store.replace(1, edited)
    assert store.all()[1] == edited
    assert store.all()[0].title == 'A'


def test_replace_bad_index():
    store = TodoStore([_todo('A')])
    with pytest.raises(IndexError):
        store.replace(1, _todo('X'))
    with pytest.raises(IndexError):
        store.replace(-1, _todo('X'))


def test_listeners_notified_on_every_mutation():
    store = TodoStore()
    calls = []
    store.subscribe(lambda: calls.append(len(store)))

    store.add(_todo('A'))
    store.replace(0, _todo('A2'))
    store.clear()

    assert calls == [1, 1, 0]


def test_unsubscribed_listener_not_notified():
    store = TodoStore()
    calls = []
    listener = lambda: calls.append(len(store))
    store.subscribe(listener)

    store.add(_todo('A'))
    store.unsubscribe(listener)
    store.clear()
    store.unsubscribe(listener)

    assert calls == [1], "Only the add before unsubscribing is seen"
