"""Pytest marker auto-assignment by folder and shared schema fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from intakeforms import logger
from intakeforms.typing.enums import ConditionOperator, FieldType
from intakeforms.typing.models import ConditionalLogic, FormField, FormSchema


def _mark_tests_by_directory(
    config: pytest.Config,
    items: list[pytest.Item],
    marker: str,
) -> None:
    """Mark collected tests located under tests/<marker>/."""
    target_dir = Path(config.rootpath) / "tests" / marker
    target_dir = target_dir.resolve()

    for item in items:
        try:
            path = Path(str(item.fspath)).resolve()
        except Exception:
            logger.warning(
                f"Could not resolve path for test item {item.name!s}; skipping {marker!s} marker assignment",
            )
            continue

        if path == target_dir or target_dir in path.parents:
            item.add_marker(getattr(pytest.mark, marker))


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Apply directory-based markers to test items."""
    _mark_tests_by_directory(config, items, "unit")
    _mark_tests_by_directory(config, items, "integration")
    _mark_tests_by_directory(config, items, "end2end")


@pytest.fixture
def age_gated_schema() -> FormSchema:
    """Schema where `medication` only shows for adults."""
    return FormSchema(
        title="Patient Intake",
        fields=[
            FormField(id="age", type=FieldType.NUMBER, label="Age", required=True),
            FormField(
                id="medication",
                type=FieldType.TEXT,
                label="Current medication",
                required=True,
                conditional_logic=ConditionalLogic(
                    field_id="age",
                    operator=ConditionOperator.GREATER_THAN,
                    value="18",
                ),
            ),
        ],
    )


@pytest.fixture
def raw_intake_payload() -> dict[str, object]:
    """Well-formed raw payload covering every optional attribute."""
    return {
        "title": "Pre-operative Assessment",
        "fields": [
            {"id": "name", "type": "text", "label": "Full name", "required": True, "placeholder": "Jane Doe"},
            {"id": "email", "type": "email", "label": "Email"},
            {"id": "phone", "type": "phone", "label": "Phone"},
            {"id": "smoker", "type": "radio", "label": "Do you smoke?", "options": ["Yes", "No"]},
            {
                "id": "packs",
                "type": "number",
                "label": "Packs per day",
                "conditionalLogic": {"fieldId": "smoker", "operator": "equals", "value": "Yes"},
            },
            {"id": "notes", "type": "textarea", "label": "Notes", "rows": 4, "metadata": {"page": 2}},
            {"id": "allergies", "type": "checkbox", "label": "Allergies", "options": ["Latex", "Penicillin"]},
            {"id": "consent", "type": "toggle", "label": "I consent", "required": True},
            {"id": "signature", "type": "signature", "label": "Signature"},
        ],
    }
