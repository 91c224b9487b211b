from pydantic import ConfigDict
from pydantic.dataclasses import dataclass

from schemagen.models.field_row import FieldRow


@dataclass(frozen=True, config=ConfigDict(strict=True))
class TableDefinition:
    """編集中のテーブル定義全体 (1セッションにつき1つ)"""

    schema_name: str
    rows: tuple[FieldRow, ...]
    model_name: str = ""
    primary_key_row_id: str | None = None

    def __post_init__(self):
        if len(self.rows) == 0:
            raise ValueError("TableDefinition requires at least one row")

    def row_by_id(self, row_id: str) -> FieldRow | None:
        for row in self.rows:
            if row.id == row_id:
                return row

        return None

    def primary_key_row(self) -> FieldRow | None:
        if self.primary_key_row_id is None:
            return None

        return self.row_by_id(self.primary_key_row_id)

    @property
    def table_name(self) -> str:
        return self.model_name.strip()
