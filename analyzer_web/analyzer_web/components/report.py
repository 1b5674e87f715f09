"""
分析结果展示组件
摘要 / 评分 / 条款分类 / 异常项，外加“追加文件并重新分析”入口
"""
import reflex as rx
from ..state import AppState
from ..styles import (
    GLASS_CARD,
    GHOST_BUTTON,
    UPLOAD_AREA,
    COLORS,
)

MORE_FILES_UPLOAD_ID = "more_files"


def bullet_list(items) -> rx.Component:
    return rx.unordered_list(
        rx.foreach(items, lambda item: rx.list_item(item)),
        color=COLORS["body"],
    )


def section_title(text: str) -> rx.Component:
    return rx.heading(text, size="4", color=COLORS["heading"], margin_top="20px")


def score_line(label: str, value, color: str) -> rx.Component:
    return rx.hstack(
        rx.text(f"{label}:", font_weight="700", color=COLORS["heading"]),
        rx.text(value, font_weight="600", color=color),
        spacing="2",
        align="baseline",
    )


def clause_group(label: str, items) -> rx.Component:
    return rx.box(
        rx.text(f"{label}:", font_weight="700", color=COLORS["heading"]),
        bullet_list(items),
        width="100%",
    )


def report_section() -> rx.Component:
    """合并分析结果"""
    return rx.box(
        rx.heading("Combined Analysis Results", size="6", color=COLORS["heading"]),

        section_title("Summary"),
        bullet_list(AppState.summary),

        section_title("Ratings"),
        score_line("Risk Score", AppState.risk_score, COLORS["risk"]),
        score_line("Opportunity Score", AppState.opportunity_score, COLORS["opportunity"]),

        section_title("Clauses"),
        clause_group("Risks", AppState.risk_clauses),
        clause_group("Opportunities", AppState.opportunity_clauses),
        clause_group("Neutral Clauses", AppState.neutral_clauses),

        section_title("Anomalies"),
        bullet_list(AppState.anomalies),

        reanalyze_bar(),

        style=GLASS_CARD,
        margin_top="30px",
    )


def reanalyze_bar() -> rx.Component:
    """追加文件后重新分析全部文件"""
    return rx.hstack(
        rx.upload(
            rx.text("➕ Add files", font_size="0.9rem", color=COLORS["body"]),
            id=MORE_FILES_UPLOAD_ID,
            multiple=True,
            on_drop=AppState.select_files(rx.upload_files(upload_id=MORE_FILES_UPLOAD_ID)),
            style=UPLOAD_AREA,
        ),
        rx.button(
            "Add More Files and Reanalyze",
            on_click=AppState.analyze,
            disabled=AppState.is_loading,
            style=GHOST_BUTTON,
        ),
        spacing="3",
        align="center",
        margin_top="24px",
    )
