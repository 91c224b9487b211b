from schemagen.models.field_row import FieldRow, RowField
from schemagen.models.table_definition import TableDefinition
from schemagen.models.validation import (
    ValidationErrorKind,
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    "FieldRow",
    "RowField",
    "TableDefinition",
    "ValidationErrorKind",
    "ValidationIssue",
    "ValidationResult",
]
