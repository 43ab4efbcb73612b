"""Schema serialization to the JSON wire shape."""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from intakeforms.typing.models import FormField, FormSchema

_WHITESPACE = re.compile(r"\s+")


def serialize_field(field: FormField) -> dict[str, Any]:
    """Serialize a field to its wire shape.

    `conditionalLogic` is always emitted (null when the field has no rule);
    unset optional attributes are omitted.

    Args:
        field (FormField): Field to serialize.

    Returns:
        dict[str, Any]: JSON-compatible payload.
    """
    payload = field.model_dump(mode="json", by_alias=True, exclude_none=True)
    payload["conditionalLogic"] = (
        field.conditional_logic.model_dump(mode="json", by_alias=True) if field.conditional_logic else None
    )
    return payload


def serialize_schema(schema: FormSchema) -> dict[str, Any]:
    """Serialize a schema to its wire shape."""
    return {"title": schema.title, "fields": [serialize_field(field) for field in schema.fields]}


def dump_schema_json(schema: FormSchema, *, indent: int = 2) -> str:
    """Return the schema as JSON text."""
    return json.dumps(serialize_schema(schema), indent=indent, ensure_ascii=False)


def export_filename(title: str, *, suffix: str = "form") -> str:
    """Build the download file name for a schema, e.g. `Patient Intake -> patient-intake-form.json`."""
    slug = _WHITESPACE.sub("-", title.lower())
    return f"{slug}-{suffix}.json"
