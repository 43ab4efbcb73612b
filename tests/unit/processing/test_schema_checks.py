from __future__ import annotations

from intakeforms.exceptions import DuplicateFieldIdError, OptionsMissingError, SchemaReferenceError
from intakeforms.processing.schema_checks import check_fields, validate_schema
from intakeforms.typing.enums import ConditionOperator, FieldType
from intakeforms.typing.models import ConditionalLogic, FormField, FormSchema


def _rule(field_id: str) -> ConditionalLogic:
    return ConditionalLogic(field_id=field_id, operator=ConditionOperator.EQUALS, value="x")


def test_validate_schema_accepts_well_formed_schema(age_gated_schema: FormSchema) -> None:
    assert validate_schema(age_gated_schema) == []


def test_validate_schema_reports_self_reference() -> None:
    schema = FormSchema(
        title="Self",
        fields=[
            FormField(id="a", type=FieldType.TEXT, label="A"),
            FormField(id="b", type=FieldType.TEXT, label="B", conditional_logic=_rule("b")),
        ],
    )

    errors = validate_schema(schema)

    assert errors == [SchemaReferenceError(field_id="b", referenced_id="b")]
    assert errors[0].is_self_reference


def test_validate_schema_reports_every_violation() -> None:
    schema = FormSchema(
        title="Broken",
        fields=[
            FormField(id="a", type=FieldType.TEXT, label="A"),
            FormField(id="a", type=FieldType.NUMBER, label="A again"),
            FormField(id="b", type=FieldType.TEXT, label="B", conditional_logic=_rule("ghost")),
            FormField(id="c", type=FieldType.SELECT, label="C"),
            FormField(id="d", type=FieldType.RADIO, label="D", options=[]),
            FormField(id="e", type=FieldType.CHECKBOX, label="E", conditional_logic=_rule("")),
        ],
    )

    errors = validate_schema(schema)

    assert errors == [
        DuplicateFieldIdError(field_id="a", count=2),
        SchemaReferenceError(field_id="b", referenced_id="ghost"),
        OptionsMissingError(field_id="c", label="C", field_type="select"),
        OptionsMissingError(field_id="d", label="D", field_type="radio"),
        SchemaReferenceError(field_id="e", referenced_id=""),
        OptionsMissingError(field_id="e", label="E", field_type="checkbox"),
    ]


def test_validate_schema_ignores_options_on_other_types() -> None:
    schema = FormSchema(title="Plain", fields=[FormField(id="a", type=FieldType.TEXT, label="A", options=[])])

    assert validate_schema(schema) == []


def test_validate_schema_does_not_mutate(age_gated_schema: FormSchema) -> None:
    before = age_gated_schema.model_dump()

    validate_schema(age_gated_schema)

    assert age_gated_schema.model_dump() == before


def test_check_fields_accepts_references_to_extra_ids() -> None:
    fields = [FormField(id="b", type=FieldType.TEXT, label="B", conditional_logic=_rule("a"))]

    assert check_fields(fields, extra_ids=["a"]) == []
    assert check_fields(fields) == [SchemaReferenceError(field_id="b", referenced_id="a")]
