"""Per-type field capabilities.

Every `FieldType` maps to one handler exposing the behaviour that varies by
type: whether options are mandatory, the blank answer shape a renderer starts
from, the submit-time format check and the advisory check run while typing.
Callers dispatch through `handler_for` instead of comparing type strings.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, ClassVar

from intakeforms.coercion import answer_as_number, answer_as_text, is_blank
from intakeforms.typing.enums import FieldType

if TYPE_CHECKING:
    from intakeforms.typing.models import AnswerValue

INVALID_EMAIL_MESSAGE = "Please enter a valid email address"
INVALID_PHONE_MESSAGE = "Please enter a valid phone number"
INVALID_NUMBER_MESSAGE = "Please enter a valid number"


class FieldTypeHandler:
    """Default capabilities, used as-is by free-text fields."""

    requires_options: ClassVar[bool] = False

    def default_answer(self) -> AnswerValue:
        """Return the blank answer a renderer starts from."""
        return ""

    def format_error(self, value: object) -> str | None:  # noqa: ARG002
        """Return the submit-time format message for a present answer, if any."""
        return None

    def input_warning(self, value: object) -> str | None:
        """Return the advisory message shown while the answer is being typed."""
        return self.format_error(value)


class _PatternHandler(FieldTypeHandler):
    pattern: ClassVar[re.Pattern[str]]
    message: ClassVar[str]

    def format_error(self, value: object) -> str | None:
        if is_blank(value) or self.pattern.fullmatch(answer_as_text(value)):
            return None
        return self.message


class EmailHandler(_PatternHandler):
    """Email addresses."""

    pattern = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
    message = INVALID_EMAIL_MESSAGE


class PhoneHandler(_PatternHandler):
    """Phone numbers: optional leading `+`, then 8 to 20 digits, spaces, dashes or parentheses."""

    pattern = re.compile(r"\+?[0-9\s\-()]{8,20}")
    message = INVALID_PHONE_MESSAGE


class NumberHandler(FieldTypeHandler):
    """Numbers entered as text. Only the advisory check looks at the format."""

    def input_warning(self, value: object) -> str | None:
        if is_blank(value) or answer_as_number(value) is not None:
            return None
        return INVALID_NUMBER_MESSAGE


class ChoiceHandler(FieldTypeHandler):
    """Single choice among options (select, radio)."""

    requires_options = True


class CheckboxHandler(ChoiceHandler):
    """Multiple choice among options."""

    def default_answer(self) -> AnswerValue:
        return []


class ToggleHandler(FieldTypeHandler):
    """On/off switch."""

    def default_answer(self) -> AnswerValue:
        return False


class AttachmentHandler(FieldTypeHandler):
    """Signature or file, answered with an opaque blob reference."""

    def default_answer(self) -> AnswerValue:
        return None


_TEXT = FieldTypeHandler()
_CHOICE = ChoiceHandler()
_ATTACHMENT = AttachmentHandler()

_HANDLERS: dict[FieldType, FieldTypeHandler] = {
    FieldType.TEXT: _TEXT,
    FieldType.TEXTAREA: _TEXT,
    FieldType.DATE: _TEXT,
    FieldType.NUMBER: NumberHandler(),
    FieldType.EMAIL: EmailHandler(),
    FieldType.PHONE: PhoneHandler(),
    FieldType.SELECT: _CHOICE,
    FieldType.RADIO: _CHOICE,
    FieldType.CHECKBOX: CheckboxHandler(),
    FieldType.TOGGLE: ToggleHandler(),
    FieldType.SIGNATURE: _ATTACHMENT,
    FieldType.FILE: _ATTACHMENT,
}


def handler_for(field_type: FieldType | str) -> FieldTypeHandler:
    """Return the capability handler for a field type.

    Args:
        field_type (FieldType | str): Field type tag.

    Raises:
        ValueError: If the type is not supported.

    Returns:
        FieldTypeHandler: Handler for the type.
    """
    return _HANDLERS[FieldType.from_str(field_type)]


def option_field_types() -> frozenset[FieldType]:
    """Return the field types whose options list is mandatory."""
    return frozenset(field_type for field_type, handler in _HANDLERS.items() if handler.requires_options)
