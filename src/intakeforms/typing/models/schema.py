"""Form schema domain models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

from intakeforms.exceptions import UnknownFieldError
from intakeforms.typing.enums import ConditionOperator, FieldType


class ConditionalLogic(BaseModel):
    """Single-condition visibility rule attached to a field."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    field_id: str = Field(alias="fieldId")
    operator: ConditionOperator
    value: str

    @field_validator("value", mode="before")
    @classmethod
    def _literal_as_text(cls, value: object) -> object:
        """Accept numeric and boolean literals written without quotes."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, int | float):
            return str(value)
        return value


class FormField(BaseModel):
    """Single form input definition."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    id: str = Field(min_length=1)
    type: FieldType
    label: str = Field(min_length=1)
    placeholder: str | None = None
    required: bool = False
    options: list[str] = Field(default_factory=list)
    rows: PositiveInt | None = None
    conditional_logic: ConditionalLogic | None = Field(default=None, alias="conditionalLogic")
    metadata: dict[str, Any] | None = None


class FormSchema(BaseModel):
    """Form title and its ordered fields.

    Schemas are immutable: the editing helpers below return a new schema and
    leave the current one untouched, so each holder works on its own copy.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str
    fields: list[FormField] = Field(default_factory=list)

    @property
    def field_ids(self) -> list[str]:
        """Return field ids in schema order."""
        return [field.id for field in self.fields]

    def get_field(self, field_id: str) -> FormField:
        """Return the field with the given id.

        Args:
            field_id (str): Field identifier.

        Raises:
            UnknownFieldError: If no field has this id.

        Returns:
            FormField: Matching field.
        """
        for field in self.fields:
            if field.id == field_id:
                return field
        raise UnknownFieldError(field_id)

    def dependency_candidates(self, field_id: str) -> list[FormField]:
        """Return the fields a conditional rule on `field_id` may depend on."""
        return [field for field in self.fields if field.id != field_id]

    def with_field_added(self, field: FormField) -> FormSchema:
        """Return a copy with `field` appended."""
        return self.model_copy(update={"fields": [*self.fields, field]})

    def with_field_updated(self, field_id: str, **changes: Any) -> FormSchema:
        """Return a copy where the field `field_id` has `changes` applied.

        Args:
            field_id (str): Field to update.
            **changes (Any): Attribute values keyed by model field name.

        Returns:
            FormSchema: Updated schema.
        """
        current = self.get_field(field_id)
        updated = FormField.model_validate({**current.model_dump(), **changes})
        fields = [updated if field.id == field_id else field for field in self.fields]
        return self.model_copy(update={"fields": fields})

    def with_field_removed(self, field_id: str) -> FormSchema:
        """Return a copy without the field `field_id`."""
        self.get_field(field_id)
        return self.model_copy(update={"fields": [field for field in self.fields if field.id != field_id]})

    def with_field_moved(self, field_id: str, new_index: int) -> FormSchema:
        """Return a copy where `field_id` sits at `new_index` (clamped to the field range)."""
        moving = self.get_field(field_id)
        remaining = [field for field in self.fields if field.id != field_id]
        position = max(0, min(new_index, len(remaining)))
        remaining.insert(position, moving)
        return self.model_copy(update={"fields": remaining})
