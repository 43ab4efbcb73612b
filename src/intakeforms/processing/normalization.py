"""Raw field payload normalization."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from intakeforms.exceptions import FieldNormalizationError
from intakeforms.typing.enums import FieldType
from intakeforms.typing.models import FormField

_REQUIRED_ATTRIBUTES = ("id", "type", "label")
_ARTICLES = {"id": "an", "type": "a", "label": "a"}


def normalize_field(raw: object, *, index: int = 0) -> FormField | FieldNormalizationError:
    """Normalize one raw field payload.

    Optional attributes are defaulted (`required=False`, `conditional_logic=None`,
    `options=[]`) and unknown keys are dropped.

    Args:
        raw (object): Untrusted field payload.
        index (int): Position of the field in its schema, used in messages.

    Returns:
        FormField | FieldNormalizationError: Normalized field, or the first problem found.
    """
    field, issues = try_normalize_field(raw, index=index)
    if field is None:
        return issues[0]
    return field


def normalize_field_issues(raw: object, *, index: int = 0) -> list[FieldNormalizationError]:
    """Return every normalization problem of one raw field payload.

    Args:
        raw (object): Untrusted field payload.
        index (int): Position of the field in its schema.

    Returns:
        list[FieldNormalizationError]: Problems found, empty when the field is well formed.
    """
    _, issues = try_normalize_field(raw, index=index)
    return issues


def try_normalize_field(
    raw: object,
    *,
    index: int = 0,
) -> tuple[FormField | None, list[FieldNormalizationError]]:
    """Normalize one raw field payload and collect all its problems.

    Args:
        raw (object): Untrusted field payload.
        index (int): Position of the field in its schema.

    Returns:
        tuple[FormField | None, list[FieldNormalizationError]]: The field (None on failure) and its problems.
    """
    if not isinstance(raw, Mapping):
        return None, [
            FieldNormalizationError(
                index=index,
                field_id=None,
                attribute="field",
                reason=f"Field at index {index} must be an object",
            ),
        ]

    payload = _prepare_payload(raw)
    raw_id = payload.get("id")
    field_id = raw_id if isinstance(raw_id, str) and raw_id else None

    issues = _required_attribute_issues(payload, index=index, field_id=field_id)
    if issues:
        return None, issues

    try:
        field = FormField.model_validate(payload)
    except ValidationError as exc:
        name = _display_name(payload, index)
        return None, [
            FieldNormalizationError(
                index=index,
                field_id=field_id,
                attribute=str(error["loc"][0]) if error["loc"] else "field",
                reason=f'Field "{name}" has invalid {_format_loc(error["loc"])}: {error["msg"]}',
            )
            for error in exc.errors()
        ]
    return field, []


def _prepare_payload(raw: Mapping[Any, Any]) -> dict[str, Any]:
    payload = {str(key): value for key, value in raw.items()}
    # Editors emit falsy placeholders for "no rule"; treat them as absent.
    if not payload.get("conditionalLogic"):
        payload["conditionalLogic"] = None
    for attribute in ("options", "required"):
        if payload.get(attribute) is None:
            payload.pop(attribute, None)
    return payload


def _required_attribute_issues(
    payload: Mapping[str, Any],
    *,
    index: int,
    field_id: str | None,
) -> list[FieldNormalizationError]:
    issues: list[FieldNormalizationError] = []
    for attribute in _REQUIRED_ATTRIBUTES:
        value = payload.get(attribute)
        if value is None or value == "":
            reason = f"Field at index {index} is missing {_ARTICLES[attribute]} '{attribute}'"
        elif not isinstance(value, str):
            reason = f"Field at index {index} has a non-string '{attribute}'"
        else:
            continue
        issues.append(FieldNormalizationError(index=index, field_id=field_id, attribute=attribute, reason=reason))

    raw_type = payload.get("type")
    if isinstance(raw_type, str) and raw_type and raw_type not in {member.value for member in FieldType}:
        issues.append(
            FieldNormalizationError(
                index=index,
                field_id=field_id,
                attribute="type",
                reason=f'Field "{_display_name(payload, index)}" has invalid type: {raw_type}',
            ),
        )
    return issues


def _display_name(payload: Mapping[str, Any], index: int) -> str:
    for key in ("label", "id"):
        value = payload.get(key)
        if isinstance(value, str) and value:
            return value
    return str(index)


def _format_loc(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "field"
