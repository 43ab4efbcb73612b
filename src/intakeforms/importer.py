"""Single validated entry point for untrusted schema payloads."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, cast

from intakeforms import logger
from intakeforms.exceptions import SchemaError, SchemaStructureError
from intakeforms.processing.normalization import try_normalize_field
from intakeforms.processing.schema_checks import check_fields
from intakeforms.typing.models import FormSchema, ImportResult

if TYPE_CHECKING:
    from intakeforms.typing.models import FormField

_BOM = "\ufeff"


def import_schema(payload: object) -> ImportResult:
    """Turn an untrusted payload into a normalized schema.

    The payload is JSON text (``str``/``bytes``) or an already-decoded object
    of shape ``{"title": str, "fields": [...]}``. Every problem is collected;
    nothing is raised and a rejected payload never yields a partial schema.

    Args:
        payload (object): Raw payload from a file import or a form generator.

    Returns:
        ImportResult: The schema, or the complete list of rejection reasons.
    """
    decoded = _decode(payload)
    if isinstance(decoded, SchemaStructureError):
        return _rejected([decoded])

    structure_errors = _structure_errors(decoded)
    if structure_errors:
        return _rejected(structure_errors)

    document = cast("Mapping[str, object]", decoded)
    raw_fields = list(cast("list[object] | tuple[object, ...]", document["fields"]))

    errors: list[SchemaError] = []
    fields: list[FormField] = []
    rejected_ids: list[str] = []
    for index, raw_field in enumerate(raw_fields):
        field, issues = try_normalize_field(raw_field, index=index)
        if field is None:
            errors.extend(issues)
            rejected_ids.extend(issue.field_id for issue in issues if issue.field_id)
            continue
        fields.append(field)

    errors.extend(check_fields(fields, extra_ids=rejected_ids))
    if errors:
        return _rejected(errors)

    schema = FormSchema(title=cast("str", document["title"]), fields=fields)
    logger.info("Schema imported", extra={"title": schema.title, "field_count": len(schema.fields)})
    return ImportResult(form_schema=schema)


def _decode(payload: object) -> object:
    if isinstance(payload, bytes | bytearray):
        try:
            payload = bytes(payload).decode("utf-8-sig")
        except UnicodeDecodeError:
            return SchemaStructureError(reason="Schema payload is not valid UTF-8 text")
    if isinstance(payload, str):
        try:
            return json.loads(payload.removeprefix(_BOM))
        except (json.JSONDecodeError, RecursionError):
            return SchemaStructureError(
                reason="Invalid JSON syntax. Please check for missing commas, brackets, or quotes.",
            )
    return payload


def _structure_errors(document: object) -> list[SchemaError]:
    if not isinstance(document, Mapping):
        return [SchemaStructureError(reason="JSON must be a valid object")]

    errors: list[SchemaError] = []
    title = document.get("title")
    if not isinstance(title, str) or not title:
        errors.append(SchemaStructureError(reason="JSON must include a 'title' property of type string"))
    if not isinstance(document.get("fields"), list | tuple):
        errors.append(SchemaStructureError(reason="JSON must include a 'fields' array"))
    return errors


def _rejected(errors: list[SchemaError]) -> ImportResult:
    logger.warning("Schema import rejected", extra={"reasons": [str(error) for error in errors]})
    return ImportResult(errors=errors)
