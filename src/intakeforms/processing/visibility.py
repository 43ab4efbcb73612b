"""Conditional visibility evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from intakeforms.coercion import answer_as_number, answer_as_text
from intakeforms.typing.enums import ConditionOperator

if TYPE_CHECKING:
    from intakeforms.typing.models import Answers, ConditionalLogic, FormField, FormSchema


def is_visible(field: FormField, answers: Answers) -> bool:
    """Return whether a field should currently be shown.

    A field without conditional logic is always visible. A field whose
    dependency has no answer yet is hidden, whatever the operator. Rules are
    single-level: the dependency's own visibility is not consulted.

    Args:
        field (FormField): Field to evaluate.
        answers (Answers): Current answers keyed by field id.

    Returns:
        bool: True when the field is visible.
    """
    logic = field.conditional_logic
    if logic is None:
        return True

    dependency = answers.get(logic.field_id)
    if dependency is None:
        return False
    return evaluate_condition(logic, dependency)


def evaluate_condition(logic: ConditionalLogic, dependency: object) -> bool:
    """Apply a rule's operator to a present dependency answer.

    Args:
        logic (ConditionalLogic): Rule to apply.
        dependency (object): Answer of the referenced field.

    Returns:
        bool: Rule outcome. Numeric comparisons are False when either side is not numeric.
    """
    operator = logic.operator
    if operator == ConditionOperator.EQUALS:
        return answer_as_text(dependency) == logic.value
    if operator == ConditionOperator.NOT_EQUALS:
        return answer_as_text(dependency) != logic.value
    if operator == ConditionOperator.CONTAINS:
        return logic.value in answer_as_text(dependency)

    left = answer_as_number(dependency)
    right = answer_as_number(logic.value)
    if left is None or right is None:
        return False
    if operator == ConditionOperator.GREATER_THAN:
        return left > right
    return left < right


def compute_visibility(schema: FormSchema, answers: Answers) -> dict[str, bool]:
    """Return the visibility of every field, keyed by field id."""
    return {field.id: is_visible(field, answers) for field in schema.fields}
