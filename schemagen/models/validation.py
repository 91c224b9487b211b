from enum import StrEnum

from pydantic.dataclasses import dataclass


class ValidationErrorKind(StrEnum):
    MISSING_MODEL_NAME = "MISSING_MODEL_NAME"
    MISSING_FIELD_NAME = "MISSING_FIELD_NAME"
    INVALID_FIELD_NAME_FORMAT = "INVALID_FIELD_NAME_FORMAT"
    MISSING_FIELD_TYPE = "MISSING_FIELD_TYPE"
    DUPLICATE_FIELD_NAME = "DUPLICATE_FIELD_NAME"


MESSAGES = {
    ValidationErrorKind.MISSING_MODEL_NAME: "model name is required",
    ValidationErrorKind.MISSING_FIELD_NAME: "field name is required",
    ValidationErrorKind.INVALID_FIELD_NAME_FORMAT: (
        "must start with a letter and contain only letters, digits or underscores"
    ),
    ValidationErrorKind.MISSING_FIELD_TYPE: "select a type",
    ValidationErrorKind.DUPLICATE_FIELD_NAME: "field name is already used",
}


@dataclass(frozen=True)
class ValidationIssue:
    kind: ValidationErrorKind
    row_id: str | None = None  # Noneはモデル全体に対するエラー

    @property
    def message(self) -> str:
        return MESSAGES[self.kind]


@dataclass(frozen=True)
class ValidationResult:
    errors: tuple[ValidationIssue, ...] = ()

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def errors_for(self, row_id: str) -> list[ValidationIssue]:
        return [e for e in self.errors if e.row_id == row_id]

    def model_errors(self) -> list[ValidationIssue]:
        return [e for e in self.errors if e.row_id is None]

    def row_is_valid(self, row_id: str) -> bool:
        return len(self.errors_for(row_id)) == 0

    def kinds(self) -> set[ValidationErrorKind]:
        return {e.kind for e in self.errors}
