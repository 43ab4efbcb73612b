"""Project enums."""

from __future__ import annotations

from enum import StrEnum


class _EnumMixin(StrEnum):
    """Shared conversion helpers for user-facing enums."""

    @classmethod
    def from_str(cls, value: str) -> _EnumMixin:
        """Parse enum from string.

        Args:
            value: Raw string value.

        Raises:
            ValueError: If the value is not supported.

        Returns:
            _EnumMixin: Parsed enum value.
        """
        try:
            return cls(value)
        except ValueError as exc:
            message = f"Unsupported {cls.__name__} value '{value}'. Expected one of: {cls.supported()}"
            raise ValueError(message) from exc

    @classmethod
    def supported(cls) -> str:
        """Return the comma-separated list of accepted values.

        Returns:
            str: Accepted values in declaration order.
        """
        return ", ".join(member.value for member in cls)

    def to_str(self) -> str:
        """Return string representation.

        Returns:
            str: Enum string value.
        """
        return self.value


class FieldType(_EnumMixin):
    """Supported form field types."""

    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    EMAIL = "email"
    PHONE = "phone"
    DATE = "date"
    SELECT = "select"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    TOGGLE = "toggle"
    SIGNATURE = "signature"
    FILE = "file"


class ConditionOperator(_EnumMixin):
    """Comparison applied by a conditional visibility rule."""

    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    CONTAINS = "contains"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"


class FailureKind(_EnumMixin):
    """Category of a runtime validation failure."""

    REQUIRED = "required"
    SELECTION_REQUIRED = "selection_required"
    INVALID_FORMAT = "invalid_format"
