"""
Creation form controller for the To-Do screen.

Validates raw field input, turns it into a Todo and appends it to the store.
Field errors stay inside the controller and are handed back for inline display.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional

from pitodo.core.todo_store import TodoStore
from pitodo.models.todo import (
    DESCRIPTION_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    TITLE_MAX_LENGTH,
    Priority,
    Todo,
)


class ValidationErrorKind(Enum):
    EMPTY_TITLE = 'empty_title'
    TITLE_TOO_LONG = 'title_too_long'
    EMPTY_DESCRIPTION = 'empty_description'
    DESCRIPTION_TOO_LONG = 'description_too_long'
    NO_PRIORITY_SELECTED = 'no_priority_selected'
    PRIORITY_UNRESOLVED = 'priority_unresolved'


_MESSAGES = {
    ValidationErrorKind.EMPTY_TITLE: 'Please enter a title',
    ValidationErrorKind.TITLE_TOO_LONG: f'Title must be at most {TITLE_MAX_LENGTH} characters',
    ValidationErrorKind.EMPTY_DESCRIPTION: f'Description must be at least {DESCRIPTION_MIN_LENGTH} characters',
    ValidationErrorKind.DESCRIPTION_TOO_LONG: f'Description must be at most {DESCRIPTION_MAX_LENGTH} characters',
    ValidationErrorKind.NO_PRIORITY_SELECTED: 'Please select a priority',
    ValidationErrorKind.PRIORITY_UNRESOLVED: 'Unknown priority',
}


@dataclass(frozen=True)
class ValidationError:
    """A single field-level problem with the submitted input"""

    kind: ValidationErrorKind
    field: str

    @property
    def message(self) -> str:
        return _MESSAGES[self.kind]

    def to_dict(self):
        return {'field': self.field, 'code': self.kind.value, 'message': self.message}


@dataclass(frozen=True)
class ValidatedInput:
    title: str
    description: str
    priority: Priority


@dataclass(frozen=True)
class ValidationResult:
    value: Optional[ValidatedInput] = None
    errors: List[ValidationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors

    def kinds(self) -> List[ValidationErrorKind]:
        return [error.kind for error in self.errors]


@dataclass(frozen=True)
class FormState:
    """Current contents of the three input fields plus their errors"""

    title: str = ''
    description: str = ''
    priority_label: str = field(default_factory=lambda: Priority.lowest().title)
    errors: List[ValidationError] = field(default_factory=list)

    def error_for(self, field_name: str) -> Optional[str]:
        for error in self.errors:
            if error.field == field_name:
                return error.message
        return None


def _text(value) -> str:
    """Field value as entered, or empty for a missing or non-text value"""
    return value if isinstance(value, str) else ''


def validate(title: Optional[str], description: Optional[str], priority_label: Optional[str]) -> ValidationResult:
    """
    Validate raw form input

    Every field is checked so all problems are reported at once. Values that
    are not strings (e.g. numbers from a JSON body) count as empty.

    Args:
        title: Todo title
        description: Todo description
        priority_label: Display label of the selected priority

    Returns:
        ValidationResult holding either the validated input or the errors
    """
    title = _text(title)
    description = _text(description)
    priority_label = _text(priority_label)
    errors: List[ValidationError] = []

    if not title.strip():
        errors.append(ValidationError(ValidationErrorKind.EMPTY_TITLE, 'title'))
    elif len(title) > TITLE_MAX_LENGTH:
        errors.append(ValidationError(ValidationErrorKind.TITLE_TOO_LONG, 'title'))

    if not description.strip() or len(description) < DESCRIPTION_MIN_LENGTH:
        errors.append(ValidationError(ValidationErrorKind.EMPTY_DESCRIPTION, 'description'))
    elif len(description) > DESCRIPTION_MAX_LENGTH:
        errors.append(ValidationError(ValidationErrorKind.DESCRIPTION_TOO_LONG, 'description'))

    priority = None
    if not priority_label:
        errors.append(ValidationError(ValidationErrorKind.NO_PRIORITY_SELECTED, 'priority'))
    else:
        priority = Priority.by_label(priority_label)
        if priority is None:
            errors.append(ValidationError(ValidationErrorKind.PRIORITY_UNRESOLVED, 'priority'))

    if errors:
        return ValidationResult(errors=errors)
    return ValidationResult(value=ValidatedInput(title, description, priority))


class TodoFormController:
    """
    Drives the creation form: validation, store updates and field reset
    """

    def __init__(self, store: TodoStore):
        """
        Initialize the controller

        Args:
            store: Store that receives successfully submitted todos
        """
        self.store = store
        self.state = FormState()
        self.logger = logging.getLogger(__name__)

    def validate(self, title, description, priority_label) -> ValidationResult:
        return validate(title, description, priority_label)

    def submit(self, title: Optional[str], description: Optional[str], priority_label: Optional[str]) -> ValidationResult:
        """
        Validate input and append a new Todo on success

        On success the fields are reset to their defaults. On failure the
        entered values are kept along with the errors and the store is untouched.
        """
        result = self.validate(title, description, priority_label)
        if not result.ok:
            self.state = FormState(
                title=_text(title),
                description=_text(description),
                priority_label=_text(priority_label),
                errors=list(result.errors),
            )
            self.logger.info(f"Rejected todo: {[kind.value for kind in result.kinds()]}")
            return result

        value = result.value
        self.state = FormState()
        self.store.add(Todo(title=value.title, description=value.description, priority=value.priority))
        self.logger.info(f"Created todo: {value.title} [{value.priority.title}]")
        return result

    def edit(self, index: int, title, description, priority_label) -> ValidationResult:
        """
        Replace the todo at index with a validated edit

        Raises:
            IndexError: If index is outside the store
        """
        todos = self.store.all()
        if not 0 <= index < len(todos):
            raise IndexError(f"No todo at index {index}")

        result = self.validate(title, description, priority_label)
        if result.ok:
            value = result.value
            edited = replace(todos[index], title=value.title, description=value.description, priority=value.priority)
            self.store.replace(index, edited)
            self.logger.info(f"Edited todo {index}: {value.title}")
        return result

    def reset(self):
        """Restore empty title, empty description and the lowest priority"""
        self.state = FormState()
