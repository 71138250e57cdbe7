from __future__ import annotations

from .textual import Screen
from .layout import centered_card_width
from .theme import TUI_THEME_NAME, TUI_THEMES

DEFAULT_HEADER_ICON = "☕"
LAYOUT_CLASSES = ("layout-compact", "layout-normal", "layout-wide")
DENSITY_CLASSES = ("density-cozy", "density-compact")


def header_icon(screen: Screen) -> str:
    app = getattr(screen, "app", None)
    cfg = getattr(app, "cfg", None) if app else None
    icon = getattr(getattr(cfg, "tui", None), "header_icon", None)
    if icon is None:
        return DEFAULT_HEADER_ICON
    text = str(icon).strip()
    return text or DEFAULT_HEADER_ICON


def apply_theme(app, theme_name: str = TUI_THEME_NAME) -> None:
    theme = TUI_THEMES.get(theme_name)
    if theme is not None:
        app.register_theme(theme)
        app.theme = theme_name


def current_layout_mode(screen: Screen) -> str:
    app = getattr(screen, "app", None)
    mode = getattr(app, "tui_layout_mode", "normal") if app else "normal"
    return str(mode)


def sync_layout_classes(node, layout_mode: str, density: str) -> None:
    for class_name in LAYOUT_CLASSES:
        node.set_class(class_name == f"layout-{layout_mode}", class_name)
    for class_name in DENSITY_CLASSES:
        node.set_class(class_name == f"density-{density}", class_name)


def sync_screen_layout(screen: Screen) -> None:
    app = getattr(screen, "app", None)
    if app is None:
        return
    mode = str(getattr(app, "tui_layout_mode", "normal"))
    density = str(getattr(app, "tui_density", "cozy"))
    sync_layout_classes(screen, mode, density)


def apply_centered_card_width(screen: Screen, selector: str) -> None:
    card = screen.query_one(selector)
    width = getattr(getattr(screen, "size", None), "width", 0)
    if isinstance(width, int) and width > 0:
        card.styles.width = centered_card_width(width, current_layout_mode(screen))


def set_hidden(widget, hidden: bool) -> None:
    widget.set_class(hidden, "is-hidden")
