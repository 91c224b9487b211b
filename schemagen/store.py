import dataclasses
from collections.abc import Sequence
from typing import Any, Callable

from loguru import logger

from schemagen import config
from schemagen.models.field_row import FieldRow, RowField
from schemagen.models.table_definition import TableDefinition
from schemagen.utils.state_store import State


class FieldRowStore:
    """
    テーブル定義の行を保持するストア

    行の追加・更新・削除と主キーの選択を担当する。変更のたびに
    TableDefinition全体を差し替え、バインドされたコールバックへ通知する。
    """

    def __init__(
        self,
        schemas: Sequence[str] | None = None,
        data_types: Sequence[str] | None = None,
    ):
        self.schemas = list(config.SCHEMAS if schemas is None else schemas)
        self.data_types = list(config.DATA_TYPES if data_types is None else data_types)

        self._state: State[TableDefinition] = State(self._initial_definition())

    @property
    def definition(self) -> TableDefinition:
        return self._state.value

    @property
    def rows(self) -> tuple[FieldRow, ...]:
        return self.definition.rows

    @property
    def can_remove_row(self) -> bool:
        return len(self.rows) > 1

    def bind_callback(self, callback: Callable[[], None]):
        self._state.bind_callback(callback)

    def reset(self):
        logger.debug("Reset table definition")
        self._state.set(self._initial_definition())

    def add_row(self) -> FieldRow:
        row = self._new_row()
        self._replace(rows=self.rows + (row,))
        logger.info(f"Row added: {row.id}")

        return row

    def remove_row(self, row_id: str) -> bool:
        if self.definition.row_by_id(row_id) is None:
            logger.debug(f"Row {row_id} not found. Skip removal")
            return False
        if not self.can_remove_row:
            logger.debug("The last remaining row cannot be removed")
            return False

        rows = tuple(r for r in self.rows if r.id != row_id)
        primary_key_row_id = self.definition.primary_key_row_id
        if primary_key_row_id == row_id:
            logger.debug(f"Primary key {row_id} cleared with its row")
            primary_key_row_id = None

        self._replace(rows=rows, primary_key_row_id=primary_key_row_id)
        logger.info(f"Row removed: {row_id}")

        return True

    def update_field(self, row_id: str, field: RowField | str, value: Any) -> bool:
        field = RowField(field)
        row = self.definition.row_by_id(row_id)
        if row is None:
            logger.debug(f"Row {row_id} not found. Skip update of {field}")
            return False

        new_row = dataclasses.replace(row, **{field.value: value})
        rows = tuple(new_row if r.id == row_id else r for r in self.rows)
        self._replace(rows=rows)
        logger.debug(f"Row {row_id} updated: {field}={value!r}")

        return True

    def set_primary_key(self, row_id: str | None):
        self._replace(primary_key_row_id=row_id)
        logger.debug(f"Primary key set to {row_id}")

    def select_schema(self, schema_name: str):
        if schema_name not in self.schemas:
            logger.warning(f"Schema '{schema_name}' is not configured")
        self._replace(schema_name=schema_name)

    def set_model_name(self, model_name: str):
        self._replace(model_name=model_name)

    def _new_row(self) -> FieldRow:
        data_type = self.data_types[0] if self.data_types else ""
        return FieldRow.construct_auto(data_type)

    def _initial_definition(self) -> TableDefinition:
        return TableDefinition(
            schema_name=self.schemas[0] if self.schemas else "",
            rows=(FieldRow.construct_auto(),),
        )

    def _replace(self, **changes):
        self._state.set(dataclasses.replace(self.definition, **changes))
