"""
Reflex 样式系统
Theme: Luminous Light Theme，精简为分析页与日志页所需的部分
"""

# ========================================================
# 1. COLOR PALETTE & TYPOGRAPHY
# ========================================================
COLORS = {
    "heading": "#1E293B",      # slate-800
    "body": "#64748B",         # slate-500
    "muted": "#94A3B8",        # slate-400
    "accent": "#6366F1",       # indigo-500
    "risk": "#DC2626",         # red-600
    "opportunity": "#059669",  # emerald-600
    "border": "#E2E8F0",       # slate-200
    "bg_base": "#F8FAFC",      # slate-50
}

FONT_FAMILY = "Inter, -apple-system, BlinkMacSystemFont, Arial, sans-serif"

SIDEBAR_WIDTH = "220px"

# ========================================================
# 2. GLOBAL BACKGROUND
# ========================================================
LUMINOUS_BG = {
    "background_color": COLORS["bg_base"],
    "background_image": (
        "radial-gradient(circle at 15% 15%, rgba(191, 219, 254, 0.35) 0px, transparent 400px), "
        "radial-gradient(circle at 85% 85%, rgba(233, 213, 255, 0.35) 0px, transparent 400px)"
    ),
    "position": "fixed",
    "top": "0",
    "left": "0",
    "width": "100vw",
    "height": "100vh",
    "z_index": "-50",
}

# ========================================================
# 3. CARDS
# ========================================================
GLASS_CARD = {
    "background": "rgba(255, 255, 255, 0.75)",
    "backdrop_filter": "blur(24px)",
    "border": "1px solid rgba(255, 255, 255, 0.6)",
    "border_radius": "20px",
    "box_shadow": "0 20px 40px -10px rgba(224, 231, 255, 0.6)",
    "padding": "28px",
    "width": "100%",
}

GLASS_SIDEBAR = {
    "background": "rgba(255, 255, 255, 0.75)",
    "backdrop_filter": "blur(32px) saturate(180%)",
    "border": "1px solid rgba(255, 255, 255, 0.6)",
    "border_radius": "24px",
    "box_shadow": "0 20px 40px -10px rgba(224, 231, 255, 0.5)",
}

# ========================================================
# 4. BUTTONS & INPUTS
# ========================================================
PRIMARY_BUTTON = {
    "background": "linear-gradient(135deg, #3B82F6 0%, #6366F1 100%)",
    "color": "white",
    "border_radius": "12px",
    "font_weight": "600",
    "cursor": "pointer",
    "_disabled": {"opacity": "0.6", "cursor": "not-allowed"},
}

GHOST_BUTTON = {
    "background": "rgba(255, 255, 255, 0.6)",
    "color": COLORS["accent"],
    "border": f"1px solid {COLORS['border']}",
    "border_radius": "12px",
    "font_weight": "600",
    "cursor": "pointer",
    "_hover": {"background": "rgba(255, 255, 255, 0.95)"},
    "_disabled": {"opacity": "0.6", "cursor": "not-allowed"},
}

UPLOAD_AREA = {
    "border": "2px dashed rgba(99, 102, 241, 0.25)",
    "border_radius": "16px",
    "background": "rgba(255, 255, 255, 0.4)",
    "padding": "20px",
    "cursor": "pointer",
    "_hover": {
        "background": "rgba(255, 255, 255, 0.7)",
        "border_color": "rgba(99, 102, 241, 0.45)",
    },
    "transition": "all 0.2s ease",
}

# ========================================================
# 5. LOG TABLE
# ========================================================
TABLE_CELL = {
    "border": f"1px solid {COLORS['border']}",
    "padding": "8px",
}

# 只截断显示，完整内容放在 title 提示里
TRUNCATED_CELL = {
    **TABLE_CELL,
    "max_width": "300px",
    "overflow": "hidden",
    "text_overflow": "ellipsis",
    "white_space": "nowrap",
}

# ========================================================
# 6. GLOBAL CSS
# ========================================================
GLOBAL_STYLE = {
    "body": {
        "background": COLORS["bg_base"],
        "color": COLORS["heading"],
        "font_family": FONT_FAMILY,
    },
}
