"""Core domain model exports."""

from intakeforms.typing.models.results import (
    Answers,
    AnswerValue,
    ImportResult,
    SubmissionResult,
    ValidationFailure,
)
from intakeforms.typing.models.schema import ConditionalLogic, FormField, FormSchema

__all__ = [
    "AnswerValue",
    "Answers",
    "ConditionalLogic",
    "FormField",
    "FormSchema",
    "ImportResult",
    "SubmissionResult",
    "ValidationFailure",
]
