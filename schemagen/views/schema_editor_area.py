import flet as ft
from loguru import logger

from schemagen.controllers.schema_editor_controller import SchemaEditorController
from schemagen.models.field_row import FieldRow, RowField
from schemagen.models.table_definition import TableDefinition
from schemagen.models.validation import ValidationErrorKind, ValidationIssue
from schemagen.store import FieldRowStore

NAME_ERROR_KINDS = {
    ValidationErrorKind.MISSING_FIELD_NAME,
    ValidationErrorKind.INVALID_FIELD_NAME_FORMAT,
    ValidationErrorKind.DUPLICATE_FIELD_NAME,
}


def _error_text(issues: list[ValidationIssue]) -> str | None:
    if not issues:
        return None

    return issues[0].message


class _SchemaSelector(ft.Dropdown):
    def __init__(self, controller: SchemaEditorController):
        super().__init__()

        self.controller = controller

        self.options = [ft.dropdown.Option(s) for s in controller.store.schemas]
        self.value = controller.definition.schema_name
        self.width = 200
        self.on_change = self.on_change_func

    def on_change_func(self, e: ft.ControlEvent):
        logger.info(f"Schema selected: {self.value}")
        self.controller.select_schema(self.value or "")


class _ModelNameField(ft.TextField):
    def __init__(self, controller: SchemaEditorController):
        super().__init__()

        self.controller = controller

        self.hint_text = "model name"
        self.expand = True
        self.value = controller.definition.model_name
        self.on_change = self.on_change_func

    def on_change_func(self, e: ft.ControlEvent):
        self.controller.set_model_name(e.control.value)

    def sync(self):
        self.value = self.controller.definition.model_name
        self.error_text = _error_text(self.controller.visible_errors())


class _FieldRowEditor(ft.Row):
    """1行分の編集コントロール"""

    def __init__(self, controller: SchemaEditorController, row: FieldRow):
        super().__init__()

        self.controller = controller
        self.row_id = row.id

        self.vertical_alignment = ft.CrossAxisAlignment.START

        self.name_field = ft.TextField(
            value=row.name,
            hint_text="name",
            expand=2,
            on_change=lambda e: self._update(RowField.NAME, e.control.value),
        )
        self.type_selector = ft.Dropdown(
            value=row.data_type or None,
            hint_text="select",
            options=[ft.dropdown.Option(t) for t in controller.store.data_types],
            expand=2,
            on_change=lambda e: self._update(RowField.DATA_TYPE, e.control.value or ""),
        )
        self.nullable_checkbox = ft.Checkbox(
            label="nullable",
            value=row.is_nullable,
            on_change=lambda e: self._update(RowField.IS_NULLABLE, bool(e.control.value)),
        )
        self.primary_checkbox = ft.Checkbox(
            label="primary",
            value=False,
            on_change=lambda e: self.controller.toggle_primary_key(
                self.row_id, bool(e.control.value)
            ),
        )
        self.unique_checkbox = ft.Checkbox(
            label="unique",
            value=row.is_unique,
            on_change=lambda e: self._update(RowField.IS_UNIQUE, bool(e.control.value)),
        )
        self.default_field = ft.TextField(
            value=row.default_value,
            hint_text="default",
            expand=2,
            on_change=lambda e: self._update(RowField.DEFAULT_VALUE, e.control.value),
        )
        self.remove_button = ft.IconButton(
            icon=ft.Icons.DELETE_OUTLINE_ROUNDED,
            tooltip="Remove field",
            icon_color=ft.Colors.RED_400,
            on_click=lambda _: self.controller.remove_row(self.row_id),
        )

        self.controls = [
            self.name_field,
            self.type_selector,
            self.nullable_checkbox,
            self.primary_checkbox,
            self.unique_checkbox,
            self.default_field,
            self.remove_button,
        ]

    def _update(self, field: RowField, value):
        self.controller.update_field(self.row_id, field, value)

    def sync(self, definition: TableDefinition):
        issues = self.controller.visible_errors(self.row_id)
        name_issues = [i for i in issues if i.kind in NAME_ERROR_KINDS]
        type_issues = [i for i in issues if i.kind not in NAME_ERROR_KINDS]

        self.name_field.error_text = _error_text(name_issues)
        self.type_selector.error_text = _error_text(type_issues)
        self.primary_checkbox.value = definition.primary_key_row_id == self.row_id
        self.remove_button.disabled = not self.controller.store.can_remove_row


class _FieldRowList(ft.Column):
    def __init__(self, controller: SchemaEditorController):
        super().__init__()

        self.controller = controller

        self.spacing = 10
        self.scroll = ft.ScrollMode.AUTO
        self.expand = True
        self._editors: dict[str, _FieldRowEditor] = {}

        self.sync()

    def sync(self):
        """Keep one editor per row without rebuilding editors that still exist."""
        definition = self.controller.definition
        editors = {}
        for row in definition.rows:
            editor = self._editors.get(row.id) or _FieldRowEditor(self.controller, row)
            editor.sync(definition)
            editors[row.id] = editor

        self._editors = editors
        self.controls = list(editors.values())


class _ActionBar(ft.Row):
    def __init__(self, controller: SchemaEditorController):
        super().__init__()

        self.alignment = ft.MainAxisAlignment.END
        self.controls = [
            ft.OutlinedButton(
                "New table",
                icon=ft.Icons.OPEN_IN_NEW_ROUNDED,
                on_click=lambda _: controller.new_definition(),
            ),
            ft.FilledButton(
                "Add field",
                icon=ft.Icons.ADD,
                on_click=lambda _: controller.add_row(),
            ),
            ft.FilledButton(
                "Generate",
                icon=ft.Icons.CODE_ROUNDED,
                style=ft.ButtonStyle(bgcolor=ft.Colors.GREEN_700),
                on_click=lambda _: controller.generate(),
            ),
        ]


class SchemaEditorArea(ft.Column):
    def __init__(self, page: ft.Page, store: FieldRowStore | None = None):
        super().__init__()

        self.expand = True
        self.spacing = 20

        self.controller = SchemaEditorController(
            store=store or FieldRowStore(),
            pubsub=page.pubsub,
            update_view_callback=self.refresh,
        )

        # Widgets
        self.schema_selector = _SchemaSelector(self.controller)
        self.model_name_field = _ModelNameField(self.controller)
        self.field_row_list = _FieldRowList(self.controller)

        self.controls = [
            ft.Row([self.schema_selector, self.model_name_field]),
            self.field_row_list,
            _ActionBar(self.controller),
        ]

    def refresh(self):
        self.schema_selector.value = self.controller.definition.schema_name
        self.model_name_field.sync()
        self.field_row_list.sync()
        self.update()
