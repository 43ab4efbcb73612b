"""IntakeForms package."""

from intakeforms.exceptions import (
    DuplicateFieldIdError,
    FieldNormalizationError,
    OptionsMissingError,
    PackageError,
    SchemaError,
    SchemaImportRejectedError,
    SchemaReferenceError,
    SchemaStructureError,
    SettingsError,
    UnknownFieldError,
)
from intakeforms.logging import configure_logging, get_logger
from intakeforms.settings import Settings, get_settings

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("intakeforms")

__all__ = [
    "DuplicateFieldIdError",
    "FieldNormalizationError",
    "OptionsMissingError",
    "PackageError",
    "SchemaError",
    "SchemaImportRejectedError",
    "SchemaReferenceError",
    "SchemaStructureError",
    "Settings",
    "SettingsError",
    "UnknownFieldError",
    "__version__",
    "configure_logging",
    "get_logger",
    "get_settings",
    "logger",
]
