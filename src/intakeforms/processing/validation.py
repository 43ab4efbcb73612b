"""Submission validation over visible fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

from intakeforms.coercion import is_blank
from intakeforms.field_types import handler_for
from intakeforms.processing.visibility import compute_visibility
from intakeforms.typing.enums import FailureKind
from intakeforms.typing.models import ValidationFailure

if TYPE_CHECKING:
    from collections.abc import Mapping

    from intakeforms.typing.models import Answers, FormField, FormSchema

REQUIRED_MESSAGE = "This field is required"
SELECTION_REQUIRED_MESSAGE = "Please select at least one option"


def collect_validation_failures(
    schema: FormSchema,
    answers: Answers,
    visibility: Mapping[str, bool] | None = None,
) -> list[ValidationFailure]:
    """Validate the answers of every visible field, in schema order.

    Hidden fields are neither required nor format-checked.

    Args:
        schema (FormSchema): Form schema.
        answers (Answers): Current answers keyed by field id.
        visibility (Mapping[str, bool] | None): Precomputed `compute_visibility` result, computed when omitted.

    Returns:
        list[ValidationFailure]: At most one failure per field.
    """
    if visibility is None:
        visibility = compute_visibility(schema, answers)
    failures: list[ValidationFailure] = []
    for field in schema.fields:
        if not visibility.get(field.id, False):
            continue
        failure = _validate_field(field, answers.get(field.id))
        if failure is not None:
            failures.append(failure)
    return failures


def validate_form(
    schema: FormSchema,
    answers: Answers,
    visibility: Mapping[str, bool] | None = None,
) -> dict[str, str]:
    """Return validation messages keyed by field id.

    Args:
        schema (FormSchema): Form schema.
        answers (Answers): Current answers keyed by field id.
        visibility (Mapping[str, bool] | None): Precomputed `compute_visibility` result.

    Returns:
        dict[str, str]: Error message per invalid visible field; empty when the submission is acceptable.
    """
    failures = collect_validation_failures(schema, answers, visibility)
    return {failure.field_id: failure.message for failure in failures}


def check_answer(field: FormField, value: object) -> str | None:
    """Return the advisory message for an answer being typed, if any.

    Unlike `validate_form`, this also flags non-numeric answers to number
    fields. It never considers `required`.
    """
    return handler_for(field.type).input_warning(value)


def _validate_field(field: FormField, value: object) -> ValidationFailure | None:
    if field.required and is_blank(value):
        if isinstance(value, list | tuple):
            return _failure(field, FailureKind.SELECTION_REQUIRED, SELECTION_REQUIRED_MESSAGE)
        return _failure(field, FailureKind.REQUIRED, REQUIRED_MESSAGE)

    message = handler_for(field.type).format_error(value)
    if message is not None:
        return _failure(field, FailureKind.INVALID_FORMAT, message)
    return None


def _failure(field: FormField, kind: FailureKind, message: str) -> ValidationFailure:
    return ValidationFailure(field_id=field.id, label=field.label, kind=kind, message=message)
