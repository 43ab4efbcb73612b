"""Typing-centric domain modules."""

from intakeforms.typing.enums import ConditionOperator, FailureKind, FieldType
from intakeforms.typing.models import (
    Answers,
    AnswerValue,
    ConditionalLogic,
    FormField,
    FormSchema,
    ImportResult,
    SubmissionResult,
    ValidationFailure,
)
from intakeforms.typing.protocol import AnswerStore

__all__ = [
    "AnswerStore",
    "AnswerValue",
    "Answers",
    "ConditionOperator",
    "ConditionalLogic",
    "FailureKind",
    "FieldType",
    "FormField",
    "FormSchema",
    "ImportResult",
    "SubmissionResult",
    "ValidationFailure",
]
