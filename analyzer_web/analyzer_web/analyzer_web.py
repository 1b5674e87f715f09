"""
Reflex 主应用入口
单页面：分析视图 / 日志视图二选一
"""
import reflex as rx
from .state import AppState
from .components import sidebar, analyzer_page, logs_page
from .styles import (
    GLOBAL_STYLE,
    LUMINOUS_BG,
    SIDEBAR_WIDTH,
    COLORS,
    FONT_FAMILY,
)


def layout(content: rx.Component) -> rx.Component:
    """通用页面布局"""
    return rx.box(
        rx.box(style=LUMINOUS_BG),
        sidebar(),
        rx.box(
            content,
            margin_left=f"calc({SIDEBAR_WIDTH} + 20px)",
            width=f"calc(100% - {SIDEBAR_WIDTH} - 40px)",
            min_height="100vh",
            padding="40px",
            padding_top="30px",
        ),
        font_family=FONT_FAMILY,
        color=COLORS["heading"],
    )


def index() -> rx.Component:
    return layout(
        rx.vstack(
            rx.heading("Document Analyzer", size="8", color=COLORS["heading"]),
            rx.text(
                "Upload multiple documents to combine and analyze their content.",
                color=COLORS["body"],
                margin_bottom="20px",
            ),
            rx.cond(
                AppState.view_mode == "analyzer",
                analyzer_page(),
                logs_page(),
            ),
            width="100%",
            max_width="960px",
            align="start",
        )
    )


# App Configuration
app = rx.App(
    theme=rx.theme(
        appearance="light",
        accent_color="indigo",
        radius="large",
    ),
    style=GLOBAL_STYLE,
)

app.add_page(index, route="/", title="Document Analyzer")
