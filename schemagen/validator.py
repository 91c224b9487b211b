import re

from schemagen.models.field_row import FieldRow
from schemagen.models.table_definition import TableDefinition
from schemagen.models.validation import (
    ValidationErrorKind,
    ValidationIssue,
    ValidationResult,
)

FIELD_NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9_]*")


def is_valid_field_name(name: str) -> bool:
    return FIELD_NAME_PATTERN.fullmatch(name) is not None


def field_name_error(name: str) -> ValidationErrorKind | None:
    """
    フィールド名のエラー種別を返す

    Args:
        name: フィールド名

    Returns:
        エラー種別。問題がなければNone
    """
    if name.strip() == "":
        return ValidationErrorKind.MISSING_FIELD_NAME

    if not is_valid_field_name(name):
        return ValidationErrorKind.INVALID_FIELD_NAME_FORMAT

    return None


def validate_row(row: FieldRow) -> list[ValidationIssue]:
    issues = []

    name_error = field_name_error(row.name)
    if name_error is not None:
        issues.append(ValidationIssue(name_error, row.id))

    if row.data_type == "":
        issues.append(ValidationIssue(ValidationErrorKind.MISSING_FIELD_TYPE, row.id))

    return issues


def validate(definition: TableDefinition) -> ValidationResult:
    """Compute the validity of the whole definition from a snapshot."""
    issues = []
    if definition.model_name.strip() == "":
        issues.append(ValidationIssue(ValidationErrorKind.MISSING_MODEL_NAME))

    seen_names = set()
    for row in definition.rows:
        issues.extend(validate_row(row))

        # 重複は名前自体が正しい行だけを対象にする
        if field_name_error(row.name) is not None:
            continue
        if row.name in seen_names:
            issues.append(
                ValidationIssue(ValidationErrorKind.DUPLICATE_FIELD_NAME, row.id)
            )
        seen_names.add(row.name)

    return ValidationResult(tuple(issues))
