import sys

import flet as ft
from loguru import logger

from schemagen import config
from schemagen.store import FieldRowStore
from schemagen.views.output_area import OutputArea
from schemagen.views.schema_editor_area import SchemaEditorArea


def main(page: ft.Page):
    page.window.width = config.WINDOW_WIDTH
    page.window.height = config.WINDOW_HEIGHT
    page.horizontal_alignment = ft.CrossAxisAlignment.STRETCH
    page.title = config.APP_TITLE
    page.theme = ft.Theme(
        color_scheme_seed=ft.Colors.GREY_50,
    )
    page.theme_mode = ft.ThemeMode.DARK
    page.padding = 20

    logger.debug(f"Initialize store: schemas={config.SCHEMAS}")
    store = FieldRowStore(config.SCHEMAS, config.DATA_TYPES)

    # Widgets
    schema_editor_area = SchemaEditorArea(page=page, store=store)
    output_area = OutputArea(page=page)

    page.add(
        ft.Column(
            [schema_editor_area, output_area],
            expand=True,
        )
    )


def run():
    logger.remove()
    logger.add(sys.stderr, level=config.LOG_LEVEL)

    ft.app(target=main)


if __name__ == "__main__":
    run()
