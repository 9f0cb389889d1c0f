"""
To-Do List API Routes

Flask Blueprint feeding the creation form and reading the list.
"""

import logging
from flask import Blueprint, jsonify, request

from pitodo.models.todo import Priority

# Create Blueprint
todo_bp = Blueprint('todo', __name__)
logger = logging.getLogger(__name__)

# TodoManager instance will be set by webserver
todo_manager = None


def init_routes(manager):
    """
    Initialize routes with TodoManager instance

    Args:
        manager: TodoManager instance
    """
    global todo_manager
    todo_manager = manager
    logger.info("Initialized To-Do routes")


def _form_fields():
    """
    Title, description and priority from a JSON object or form body

    Returns:
        Tuple of the three raw values, or None if the JSON body is not an object
    """
    data = request.get_json(silent=True)
    if data is None:
        data = request.form
    elif not isinstance(data, dict):
        return None
    return data.get('title'), data.get('description'), data.get('priority')


def _bad_body():
    return jsonify({'error': 'Expected a JSON object with title, description and priority'}), 400


@todo_bp.route('/api/priorities', methods=['GET'])
def get_priorities():
    """Priority labels for the selection control"""
    return jsonify({'priorities': Priority.labels(), 'default': Priority.lowest().title})


@todo_bp.route('/api/todos', methods=['GET'])
def get_todos():
    """Get all to-do display records"""
    records = todo_manager.records()
    return jsonify({'todos': [record.to_dict() for record in records], 'total': len(records)})


@todo_bp.route('/api/todos', methods=['POST'])
def add_todo():
    """Submit the creation form"""
    fields = _form_fields()
    if fields is None:
        return _bad_body()

    result = todo_manager.form.submit(*fields)

    if not result.ok:
        todo_manager.refresh_screen()
        return jsonify({'errors': [error.to_dict() for error in result.errors]}), 400

    record = todo_manager.records()[-1]
    return jsonify({'success': True, 'todo': record.to_dict(), 'total': len(todo_manager.store)}), 201


@todo_bp.route('/api/todos/<int:index>', methods=['PUT'])
def edit_todo(index):
    """Replace the todo at index with an edited copy"""
    fields = _form_fields()
    if fields is None:
        return _bad_body()

    try:
        result = todo_manager.form.edit(index, *fields)
    except IndexError:
        return jsonify({'error': 'Task not found'}), 404

    if not result.ok:
        return jsonify({'errors': [error.to_dict() for error in result.errors]}), 400

    logger.info(f"Edited todo {index}")
    return jsonify({'success': True, 'todo': todo_manager.records()[index].to_dict()})
