"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass


class PackageError(Exception):
    """Root exception for the package."""


@dataclass(frozen=True)
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


class SchemaError(PackageError):
    """Base class for import-time schema issues.

    Instances are collected and returned as data by the importer and by
    `validate_schema`; they are not raised past those boundaries.
    """

    @property
    def message(self) -> str:
        """Return the human-readable reason."""
        return str(self)


@dataclass(frozen=True)
class FieldNormalizationError(SchemaError):
    """A raw field is missing `id`/`type`/`label` or carries a malformed attribute."""

    index: int
    field_id: str | None
    attribute: str
    reason: str

    def __str__(self) -> str:
        """Return error message payload."""
        return self.reason


@dataclass(frozen=True)
class SchemaStructureError(SchemaError):
    """The top-level payload is not an object with `title` and `fields`."""

    reason: str

    def __str__(self) -> str:
        """Return error message payload."""
        return self.reason


@dataclass(frozen=True)
class SchemaReferenceError(SchemaError):
    """Conditional logic points at a missing field or at its own field."""

    field_id: str
    referenced_id: str

    @property
    def is_self_reference(self) -> bool:
        """Return whether the field references itself."""
        return self.field_id == self.referenced_id

    def __str__(self) -> str:
        """Return error message payload."""
        if self.is_self_reference:
            return f'Field "{self.field_id}" has conditional logic referencing itself'
        return f'Field "{self.field_id}" has conditional logic referencing unknown field "{self.referenced_id}"'


@dataclass(frozen=True)
class OptionsMissingError(SchemaError):
    """A select/radio/checkbox field has no non-empty options list."""

    field_id: str
    label: str
    field_type: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f'Field "{self.label or self.field_id}" of type {self.field_type} requires options array'


@dataclass(frozen=True)
class DuplicateFieldIdError(SchemaError):
    """Several fields share the same id."""

    field_id: str
    count: int

    def __str__(self) -> str:
        """Return error message payload."""
        return f'Field id "{self.field_id}" is used by {self.count} fields'


@dataclass(frozen=True)
class SchemaImportRejectedError(PackageError):
    """Raised by `ImportResult.unwrap` when the payload was rejected."""

    errors: tuple[SchemaError, ...]

    def __str__(self) -> str:
        """Return error message payload."""
        reasons = "\n".join(str(error) for error in self.errors)
        return f"Schema import rejected:\n{reasons}"


@dataclass(frozen=True)
class UnknownFieldError(PackageError):
    """Raised when a field id does not exist in the schema."""

    field_id: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Unknown field id: {self.field_id}"
