"""Answer, validation and import result models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from intakeforms.exceptions import SchemaError, SchemaImportRejectedError
from intakeforms.typing.enums import FailureKind
from intakeforms.typing.models.schema import FormSchema

# str for text-like and single-choice fields, list[str] for checkbox,
# bool for toggle, an opaque blob reference (or None) for signature/file.
AnswerValue = str | list[str] | bool | None
Answers = Mapping[str, Any]


class ValidationFailure(BaseModel):
    """Runtime validation failure for one visible field."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    field_id: str
    label: str
    kind: FailureKind
    message: str


class ImportResult(BaseModel):
    """Outcome of importing an untrusted schema payload."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    form_schema: FormSchema | None = None
    errors: list[SchemaError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return whether the payload was accepted."""
        return self.form_schema is not None and not self.errors

    @property
    def reasons(self) -> list[str]:
        """Return human-readable rejection reasons."""
        return [str(error) for error in self.errors]

    def unwrap(self) -> FormSchema:
        """Return the imported schema.

        Raises:
            SchemaImportRejectedError: If the payload was rejected.

        Returns:
            FormSchema: Normalized schema.
        """
        if self.form_schema is None or self.errors:
            raise SchemaImportRejectedError(errors=tuple(self.errors))
        return self.form_schema


class SubmissionResult(BaseModel):
    """Outcome of submitting a form session."""

    model_config = ConfigDict(extra="forbid")

    accepted: bool
    errors: dict[str, str] = Field(default_factory=dict)
    answers: dict[str, Any] | None = None
    first_error_field_id: str | None = None
