import flet as ft
from loguru import logger

from schemagen.models.validation import ValidationResult
from schemagen.topics import Topics


class _CopyButton(ft.IconButton):
    def __init__(self, page: ft.Page, output: ft.Text):
        super().__init__()

        self.output = output
        self.clipboard_page = page

        self.icon = ft.Icons.COPY_ROUNDED
        self.tooltip = "Copy to clipboard"
        self.disabled = True
        self.on_click = self.on_click_func

    def on_click_func(self, e: ft.ControlEvent):
        logger.info("Configuration copied to clipboard")
        self.clipboard_page.set_clipboard(self.output.value)


class OutputArea(ft.Container):
    """生成された設定テキストを表示するエリア"""

    def __init__(self, page: ft.Page):
        super().__init__()

        self.border_radius = 5
        self.padding = 15
        self.bgcolor = ft.Colors.with_opacity(0.05, ft.Colors.WHITE)

        self.message = ft.Text("", color=ft.Colors.RED_300, visible=False)
        self.output = ft.Text(
            "",
            selectable=True,
            font_family="monospace",
            color=ft.Colors.GREEN_200,
        )
        self.copy_button = _CopyButton(page, self.output)

        self.content = ft.Column(
            [
                ft.Row(
                    [ft.Text("Output"), ft.Container(expand=True), self.copy_button]
                ),
                self.message,
                self.output,
            ],
            scroll=ft.ScrollMode.AUTO,
        )

        page.pubsub.subscribe_topic(
            Topics.CONFIGURATION_GENERATED, self.show_configuration
        )
        page.pubsub.subscribe_topic(Topics.GENERATION_REJECTED, self.show_rejection)
        page.pubsub.subscribe_topic(Topics.NEW_DEFINITION, self.clear_output)

    def show_configuration(self, topic: Topics, text: str):
        logger.debug(f"{self.__class__.__name__} received topic: {topic}")
        self.message.visible = False
        self.output.value = text
        self.copy_button.disabled = False
        self.update()

    def clear_output(self, topic: Topics, _):
        logger.debug(f"{self.__class__.__name__} received topic: {topic}")
        self.message.visible = False
        self.output.value = ""
        self.copy_button.disabled = True
        self.update()

    def show_rejection(self, topic: Topics, result: ValidationResult):
        logger.debug(f"{self.__class__.__name__} received topic: {topic}")
        problems = sorted({e.message for e in result.errors})
        self.message.value = "Fix before generating: " + "; ".join(problems)
        self.message.visible = True
        self.update()
