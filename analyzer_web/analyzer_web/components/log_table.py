"""
日志视图 - 请求/响应记录表
"""
import reflex as rx
from analyzer_client.utils.display import LOG_COLUMNS
from ..state import AppState
from ..styles import (
    GLASS_CARD,
    GHOST_BUTTON,
    TABLE_CELL,
    TRUNCATED_CELL,
    COLORS,
)


def logs_page() -> rx.Component:
    return rx.box(
        rx.button(
            "← Back to Analyzer",
            on_click=AppState.return_to_analyzer,
            style=GHOST_BUTTON,
        ),
        rx.heading("Logs", size="6", color=COLORS["heading"], margin_top="16px"),
        rx.cond(
            AppState.is_loading,
            rx.text("Loading logs...", color=COLORS["body"], margin_top="20px"),
            log_table(),
        ),
        style=GLASS_CARD,
    )


def log_table() -> rx.Component:
    return rx.table.root(
        rx.table.header(
            rx.table.row(
                *[rx.table.column_header_cell(label, style=TABLE_CELL) for label in LOG_COLUMNS],
            ),
        ),
        rx.table.body(
            rx.cond(
                AppState.log_placeholder != "",
                # 空列表：一行占满全部列的提示
                rx.table.row(
                    rx.table.cell(
                        AppState.log_placeholder,
                        col_span=AppState.log_placeholder_span,
                        text_align="center",
                        padding="10px",
                    ),
                ),
                rx.foreach(AppState.log_rows, log_row),
            ),
        ),
        width="100%",
        margin_top="20px",
    )


def log_row(row: dict) -> rx.Component:
    return rx.table.row(
        rx.table.row_header_cell(row["id"], style=TABLE_CELL),
        rx.table.cell(row["request"], title=row["request_full"], style=TRUNCATED_CELL),
        rx.table.cell(row["response"], title=row["response_full"], style=TRUNCATED_CELL),
        rx.table.cell(row["timestamp"], style=TABLE_CELL),
    )
