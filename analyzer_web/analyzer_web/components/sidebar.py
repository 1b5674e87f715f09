"""
Glass Sidebar - 浮动毛玻璃信息面板
显示品牌、当前视图和后端连接状态
"""
import reflex as rx
from ..state import AppState
from ..styles import (
    GLASS_SIDEBAR,
    SIDEBAR_WIDTH,
    COLORS,
    FONT_FAMILY,
)


def sidebar() -> rx.Component:
    """渲染浮动毛玻璃侧边栏"""
    return rx.box(
        rx.vstack(
            # Logo/Brand
            rx.hstack(
                rx.box(
                    rx.text("📑", font_size="1.3rem"),
                    width="40px",
                    height="40px",
                    border_radius="12px",
                    background="linear-gradient(135deg, #6366F1 0%, #8B5CF6 100%)",
                    display="flex",
                    align_items="center",
                    justify_content="center",
                ),
                rx.text(
                    "Doc Analyzer",
                    font_weight="700",
                    font_size="1.1rem",
                    color=COLORS["heading"],
                    font_family=FONT_FAMILY,
                ),
                spacing="3",
                align="center",
            ),

            rx.box(height="24px"),

            view_badge("🏠", "Analyzer", "analyzer"),
            view_badge("🗂️", "Logs", "logs"),

            rx.spacer(),

            # 后端地址
            rx.vstack(
                rx.text("Backend", font_size="0.75rem", color=COLORS["muted"], font_weight="600"),
                rx.text(
                    AppState.backend_url,
                    font_size="0.75rem",
                    color=COLORS["body"],
                    word_break="break-all",
                ),
                spacing="1",
                align="start",
                width="100%",
            ),

            # Status Indicator
            rx.box(
                rx.hstack(
                    rx.box(
                        width="8px",
                        height="8px",
                        border_radius="50%",
                        background=rx.cond(AppState.is_loading, "#F59E0B", "#22C55E"),
                    ),
                    rx.text(
                        rx.cond(AppState.is_loading, "Request in flight", "Ready"),
                        font_size="0.8rem",
                        color=COLORS["muted"],
                    ),
                    spacing="2",
                    align="center",
                ),
                padding="12px 16px",
                background=rx.cond(AppState.is_loading, "rgba(245, 158, 11, 0.08)", "rgba(34, 197, 94, 0.08)"),
                border_radius="12px",
                width="100%",
            ),

            height="100%",
            width="100%",
            padding="24px",
            align="start",
        ),
        style=GLASS_SIDEBAR,
        width=SIDEBAR_WIDTH,
        height="calc(100vh - 40px)",
        position="fixed",
        left="20px",
        top="20px",
        z_index="100",
    )


def view_badge(icon: str, label: str, mode: str) -> rx.Component:
    """当前视图指示（只读，切换通过页面按钮完成）"""
    is_active = AppState.view_mode == mode

    return rx.hstack(
        rx.text(icon, font_size="1rem"),
        rx.text(
            label,
            font_size="0.95rem",
            font_weight=rx.cond(is_active, "600", "500"),
            color=rx.cond(is_active, COLORS["accent"], COLORS["body"]),
            font_family=FONT_FAMILY,
        ),
        spacing="3",
        align="center",
        width="100%",
        padding="14px 16px",
        border_radius="14px",
        background=rx.cond(is_active, "rgba(99, 102, 241, 0.12)", "transparent"),
    )
