"""Structural checks on a normalized schema."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from intakeforms.exceptions import DuplicateFieldIdError, OptionsMissingError, SchemaError, SchemaReferenceError
from intakeforms.field_types import handler_for

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from intakeforms.typing.models import FormField, FormSchema


def validate_schema(schema: FormSchema) -> list[SchemaError]:
    """Return every structural problem of a schema.

    Checks that field ids are unique, that conditional logic references another
    existing field, and that choice fields carry a non-empty options list. The
    schema is not modified.

    Args:
        schema (FormSchema): Schema to check.

    Returns:
        list[SchemaError]: All problems found, empty when the schema is well formed.
    """
    return check_fields(schema.fields)


def check_fields(fields: Sequence[FormField], *, extra_ids: Iterable[str] = ()) -> list[SchemaError]:
    """Run the schema checks over a list of fields.

    Args:
        fields (Sequence[FormField]): Fields in schema order.
        extra_ids (Iterable[str]): Ids of sibling fields that exist but are not part of `fields`
            (e.g. fields rejected by normalization for another reason).

    Returns:
        list[SchemaError]: All problems found.
    """
    errors: list[SchemaError] = []

    counts = Counter(field.id for field in fields)
    errors.extend(
        DuplicateFieldIdError(field_id=field_id, count=count) for field_id, count in counts.items() if count > 1
    )

    known_ids = set(counts) | set(extra_ids)
    for field in fields:
        logic = field.conditional_logic
        if logic is not None and (logic.field_id == field.id or logic.field_id not in known_ids):
            errors.append(SchemaReferenceError(field_id=field.id, referenced_id=logic.field_id))

        if handler_for(field.type).requires_options and not field.options:
            errors.append(OptionsMissingError(field_id=field.id, label=field.label, field_type=field.type.value))

    return errors
