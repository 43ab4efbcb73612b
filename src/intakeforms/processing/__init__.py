"""Form schema processing helpers."""

from intakeforms.processing.normalization import normalize_field, normalize_field_issues, try_normalize_field
from intakeforms.processing.schema_checks import check_fields, validate_schema
from intakeforms.processing.serialization import dump_schema_json, export_filename, serialize_field, serialize_schema
from intakeforms.processing.validation import check_answer, collect_validation_failures, validate_form
from intakeforms.processing.visibility import compute_visibility, evaluate_condition, is_visible

__all__ = [
    "check_answer",
    "check_fields",
    "collect_validation_failures",
    "compute_visibility",
    "dump_schema_json",
    "evaluate_condition",
    "export_filename",
    "is_visible",
    "normalize_field",
    "normalize_field_issues",
    "serialize_field",
    "serialize_schema",
    "try_normalize_field",
    "validate_form",
    "validate_schema",
]
