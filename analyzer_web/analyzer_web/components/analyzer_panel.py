"""
分析视图 - 文件选择、操作按钮、已选文件列表
"""
import reflex as rx
from ..state import AppState
from ..styles import (
    GLASS_CARD,
    PRIMARY_BUTTON,
    GHOST_BUTTON,
    UPLOAD_AREA,
    COLORS,
)
from .report import report_section

FILE_UPLOAD_ID = "file_upload"


def analyzer_page() -> rx.Component:
    return rx.vstack(
        rx.box(
            rx.hstack(
                file_picker(),
                rx.button(
                    rx.cond(AppState.is_loading, "Uploading and Analyzing...", "Analyze"),
                    on_click=AppState.analyze,
                    disabled=AppState.is_loading,
                    style=PRIMARY_BUTTON,
                ),
                rx.button(
                    "Clear Files",
                    on_click=AppState.clear_files,
                    style=GHOST_BUTTON,
                ),
                rx.button(
                    "View Logs",
                    on_click=AppState.view_logs,
                    disabled=AppState.is_loading,
                    style=GHOST_BUTTON,
                ),
                spacing="3",
                align="center",
                wrap="wrap",
            ),
            selected_files(),
            style=GLASS_CARD,
        ),
        rx.cond(AppState.has_result, report_section()),
        spacing="0",
        width="100%",
    )


def file_picker() -> rx.Component:
    """多文件选择，任意类型；每次选择都追加到待上传列表"""
    return rx.upload(
        rx.hstack(
            rx.text("📂", font_size="1.2rem"),
            rx.text("Choose files", font_weight="600", color=COLORS["heading"]),
            spacing="2",
            align="center",
        ),
        id=FILE_UPLOAD_ID,
        multiple=True,
        on_drop=AppState.select_files(rx.upload_files(upload_id=FILE_UPLOAD_ID)),
        style=UPLOAD_AREA,
    )


def selected_files() -> rx.Component:
    return rx.box(
        rx.text("Selected Files:", font_weight="700", color=COLORS["heading"]),
        rx.unordered_list(
            rx.foreach(AppState.file_names, lambda name: rx.list_item(name)),
            color=COLORS["body"],
        ),
        margin_top="10px",
    )
