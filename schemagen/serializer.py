from loguru import logger

from schemagen.models.field_row import FieldRow
from schemagen.models.table_definition import TableDefinition
from schemagen.models.validation import ValidationResult
from schemagen.validator import validate

INDENT = "  "


class InvalidDefinitionError(ValueError):
    """Raised by strict serialization when the definition does not validate."""

    def __init__(self, result: ValidationResult):
        self.result = result
        kinds = ", ".join(sorted(result.kinds()))
        super().__init__(f"Table definition is invalid: {kinds}")


def _bool_token(value: bool) -> str:
    return "true" if value else "false"


def _is_emittable(row: FieldRow) -> bool:
    return row.name.strip() != "" and row.data_type != ""


def column_block(row: FieldRow, depth: int = 2) -> list[str]:
    pad = INDENT * depth
    lines = [
        f'{pad}column "{row.name}" {{',
        f"{pad}{INDENT}type = {row.data_type}",
        f"{pad}{INDENT}null = {_bool_token(row.is_nullable)}",
    ]
    if row.has_default:
        lines.append(f'{pad}{INDENT}default = "{row.default_value}"')
    lines.append(f"{pad}}}")

    return lines


def index_name(table_name: str, column_name: str) -> str:
    return f"idx_{table_name}_{column_name}"


def serialize(definition: TableDefinition, strict: bool = False) -> str:
    """
    テーブル定義をHCL形式の設定テキストに変換する

    Args:
        definition: 変換するテーブル定義のスナップショット
        strict: Trueの場合、不正な定義に対してInvalidDefinitionErrorを送出する.
            Falseの場合は名前か型が空の行を読み飛ばす

    Returns:
        設定テキスト (末尾に改行を含む)
    """
    if strict:
        result = validate(definition)
        if not result.is_valid:
            raise InvalidDefinitionError(result)

    table_name = definition.table_name
    rows = [r for r in definition.rows if _is_emittable(r)]
    if len(rows) != len(definition.rows):
        logger.debug(f"Skipped {len(definition.rows) - len(rows)} incomplete rows")

    lines = [
        f'schema "{definition.schema_name}" {{',
        f'{INDENT}table "{table_name}" {{',
    ]
    for row in rows:
        lines.extend(column_block(row))

    primary_key = definition.primary_key_row()
    if primary_key is not None and primary_key in rows:
        lines.append(
            f"{INDENT * 2}primary_key {{ columns = [column.{primary_key.name}] }}"
        )

    for row in rows:
        if not row.is_unique:
            continue
        lines.append(
            f'{INDENT * 2}index "{index_name(table_name, row.name)}" '
            f"{{ columns = [column.{row.name}] unique = true }}"
        )

    lines.append(f"{INDENT}}}")
    lines.append("}")

    return "\n".join(lines) + "\n"
