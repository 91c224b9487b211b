from typing import Any, Callable, Protocol

from loguru import logger

from schemagen.models.field_row import RowField
from schemagen.models.table_definition import TableDefinition
from schemagen.models.validation import (
    ValidationErrorKind,
    ValidationIssue,
    ValidationResult,
)
from schemagen.serializer import serialize
from schemagen.store import FieldRowStore
from schemagen.topics import Topics
from schemagen.validator import validate

# 入力途中でも即座に表示するエラー
LIVE_ERROR_KINDS = {
    ValidationErrorKind.INVALID_FIELD_NAME_FORMAT,
    ValidationErrorKind.DUPLICATE_FIELD_NAME,
}


class PubSub(Protocol):
    def send_all_on_topic(self, topic: Any, message: Any): ...


class SchemaEditorController:
    """
    テーブル定義エディタのコントローラー

    画面からの編集イベントをストアの操作に変換し、変更のたびに検証結果を
    再計算する。生成は定義が正しい場合にのみ行う。
    """

    def __init__(
        self,
        store: FieldRowStore,
        pubsub: PubSub,
        update_view_callback: Callable[[], None] | None = None,
    ):
        self.store = store
        self.pubsub = pubsub
        self.update_view_callback = update_view_callback

        self.generate_attempted = False
        self.output = ""
        self.validation: ValidationResult = validate(store.definition)

        self.store.bind_callback(self._on_definition_changed)

    @property
    def definition(self) -> TableDefinition:
        return self.store.definition

    def add_row(self):
        self.store.add_row()

    def remove_row(self, row_id: str):
        self.store.remove_row(row_id)

    def update_field(self, row_id: str, field: RowField | str, value: Any):
        self.store.update_field(row_id, field, value)

    def select_schema(self, schema_name: str):
        self.store.select_schema(schema_name)

    def set_model_name(self, model_name: str):
        self.store.set_model_name(model_name)

    def set_primary_key(self, row_id: str | None):
        self.store.set_primary_key(row_id)

    def toggle_primary_key(self, row_id: str, checked: bool):
        if checked:
            self.store.set_primary_key(row_id)
        elif self.definition.primary_key_row_id == row_id:
            self.store.set_primary_key(None)

    def new_definition(self):
        self.generate_attempted = False
        self.output = ""
        self.store.reset()
        self._publish(Topics.NEW_DEFINITION, self.definition)

    def generate(self) -> str | None:
        self.generate_attempted = True
        self.validation = validate(self.definition)

        if not self.validation.is_valid:
            logger.warning(
                f"Generation rejected: {sorted(self.validation.kinds())}"
            )
            self._publish(Topics.GENERATION_REJECTED, self.validation)
            self._update_view()
            return None

        self.output = serialize(self.definition)
        logger.info(f"Configuration generated for table '{self.definition.table_name}'")
        self._publish(Topics.CONFIGURATION_GENERATED, self.output)
        self._update_view()

        return self.output

    def visible_errors(self, row_id: str | None = None) -> list[ValidationIssue]:
        issues = (
            self.validation.model_errors()
            if row_id is None
            else self.validation.errors_for(row_id)
        )
        if self.generate_attempted:
            return issues

        return [i for i in issues if i.kind in LIVE_ERROR_KINDS]

    def _on_definition_changed(self):
        self.validation = validate(self.definition)
        self._update_view()

    def _publish(self, topic: Topics, message: Any):
        self.pubsub.send_all_on_topic(topic, message)
        logger.debug(f"{self.__class__.__name__} published topic: {topic}")

    def _update_view(self):
        if self.update_view_callback is not None:
            self.update_view_callback()
