"""Form-filling session context.

A `FormSession` owns the answer set of one form while a user fills it in. The
evaluation functions stay stateless: the session passes them a snapshot on
every call and keeps nothing else.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from intakeforms import logger
from intakeforms.field_types import handler_for
from intakeforms.logging import form_log_context
from intakeforms.processing.validation import check_answer, validate_form
from intakeforms.processing.visibility import compute_visibility
from intakeforms.typing.models import FormSchema, SubmissionResult

if TYPE_CHECKING:
    from intakeforms.typing.models import Answers, AnswerValue
    from intakeforms.typing.protocol import AnswerStore


class InMemoryAnswerStore(BaseModel):
    """Answer snapshots held in process memory."""

    model_config = ConfigDict(extra="forbid")

    snapshots: dict[str, dict[str, Any]] = Field(default_factory=dict)

    def load(self, form_title: str) -> dict[str, object] | None:
        """Return a copy of the saved answers for a form, if any."""
        saved = self.snapshots.get(form_title)
        return copy.deepcopy(saved) if saved is not None else None

    def save(self, form_title: str, answers: Answers) -> None:
        """Store a copy of the answers for a form."""
        self.snapshots[form_title] = copy.deepcopy(dict(answers))

    def delete(self, form_title: str) -> None:
        """Forget the answers of a form."""
        self.snapshots.pop(form_title, None)


class FormSession(BaseModel):
    """Answers being collected for one form."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    form_schema: FormSchema
    answers: dict[str, Any] = Field(default_factory=dict)
    store: Any = Field(default=None, description="Optional AnswerStore receiving snapshots.")

    @classmethod
    def start(cls, schema: FormSchema, store: AnswerStore | None = None) -> FormSession:
        """Open a session, restoring answers saved under the form title.

        Args:
            schema (FormSchema): Form being filled.
            store (AnswerStore | None): Snapshot store keyed by form title.

        Returns:
            FormSession: Session with restored or empty answers.
        """
        saved = store.load(schema.title) if store is not None else None
        session = cls(form_schema=schema, answers=dict(saved or {}), store=store)
        with form_log_context(schema.title):
            logger.debug("Form session started", extra={"restored_answers": len(session.answers)})
        return session

    def set_answer(self, field_id: str, value: AnswerValue) -> str | None:
        """Record one answer.

        Args:
            field_id (str): Field being answered.
            value (AnswerValue): New answer.

        Raises:
            UnknownFieldError: If the field is not part of the schema.

        Returns:
            str | None: Advisory format message for the new value, if any.
        """
        field = self.form_schema.get_field(field_id)
        self.answers[field_id] = value
        self._persist()

        warning = check_answer(field, value)
        if warning is not None:
            with form_log_context(self.form_schema.title):
                logger.warning("Answer looks invalid", extra={"field_id": field_id, "warning": warning})
        return warning

    def answer_or_default(self, field_id: str) -> AnswerValue:
        """Return the current answer, or the blank answer shape of the field's type."""
        field = self.form_schema.get_field(field_id)
        if field_id in self.answers:
            return self.answers[field_id]
        return handler_for(field.type).default_answer()

    def visibility(self) -> dict[str, bool]:
        """Return the current visibility of every field."""
        return compute_visibility(self.form_schema, self.snapshot())

    def errors(self) -> dict[str, str]:
        """Return the current validation messages keyed by field id."""
        return validate_form(self.form_schema, self.snapshot())

    def snapshot(self) -> dict[str, Any]:
        """Return a deep copy of the current answers."""
        return copy.deepcopy(self.answers)

    def submit(self) -> SubmissionResult:
        """Validate the answers and hand back the accepted snapshot.

        Returns:
            SubmissionResult: Accepted snapshot, or the errors and the first invalid field id.
        """
        answers = self.snapshot()
        errors = validate_form(self.form_schema, answers)
        with form_log_context(self.form_schema.title):
            if errors:
                logger.info("Submission rejected", extra={"invalid_fields": list(errors)})
                return SubmissionResult(accepted=False, errors=errors, first_error_field_id=next(iter(errors)))
            logger.info("Submission accepted", extra={"answer_count": len(answers)})
        return SubmissionResult(accepted=True, answers=answers)

    def reset(self) -> None:
        """Clear every answer and drop the stored snapshot."""
        self.answers.clear()
        if self.store is not None:
            self.store.delete(self.form_schema.title)

    def replace_schema(self, schema: FormSchema) -> None:
        """Swap in an edited schema, keeping the answers of fields that still exist."""
        kept = set(schema.field_ids)
        self.form_schema = schema
        self.answers = {field_id: value for field_id, value in self.answers.items() if field_id in kept}
        self._persist()

    def _persist(self) -> None:
        if self.store is not None:
            self.store.save(self.form_schema.title, self.answers)
