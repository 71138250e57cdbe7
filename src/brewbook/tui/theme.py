from __future__ import annotations

from .textual import Theme

TUI_THEME_NAME = "brewbook-ansi"

APP_CSS = """
Screen {
    background: $background;
    color: $text;
    padding: 0;
}

Header, Footer {
    background: $panel;
    color: $text;
}

.screen-shell {
    width: 1fr;
    height: 1fr;
    align: center top;
    padding: 1 2;
}

.layout-wide .screen-shell {
    padding: 1 4;
}

.layout-compact .screen-shell {
    padding: 0 1;
}

.screen-card {
    width: 1fr;
    height: 1fr;
    border: round $panel;
    background: $surface;
    padding: 1 2;
}

.layout-compact .screen-card,
.density-compact .screen-card {
    padding: 0 1;
}

#title,
#detail-title {
    text-style: bold;
    color: $text;
    content-align: center middle;
    width: 1fr;
}

#detail-meta,
#detail-subtitle {
    color: $text-muted;
    content-align: center middle;
    width: 1fr;
}

#detail-art {
    color: $accent;
    content-align: center middle;
    width: 1fr;
    height: auto;
    padding: 1 0;
}

#filter-actions,
#method-actions,
#detail-actions,
#note-actions {
    height: auto;
    align: center middle;
    padding: 1 0;
}

#filter-actions Button,
#method-actions Button,
#detail-actions Button,
#note-actions Button {
    margin: 0 1;
}

#recipe-list {
    height: 1fr;
    border: round $panel;
    background: $surface;
}

#recipe-list:focus {
    border: round $primary;
}

ListView > ListItem.--highlight,
ListView > ListItem.-highlight {
    background: $panel;
    color: $text;
    text-style: bold;
}

ListView:focus > ListItem.--highlight,
ListView:focus > ListItem.-highlight {
    background: ansi_bright_yellow;
    color: ansi_black;
    text-style: bold;
}

#detail-body {
    height: auto;
}

.section-title {
    text-style: bold;
    padding: 1 0 0 0;
}

#practical-panel {
    height: auto;
    border: round $panel;
    padding: 0 1;
}

#note-input {
    margin: 1 0 0 0;
    background: $surface;
    border: round $panel;
    color: $text;
}

#status {
    height: auto;
    padding: 1 0 0 0;
    color: $text-muted;
}

Button {
    background: $surface;
    color: $text;
    border: round $panel;
}

Button.-primary {
    background: $primary;
    color: $button-color-foreground;
    border: round $primary;
}

Button:focus {
    background: $primary;
    color: $button-color-foreground;
    border: round $primary;
    text-style: none;
}

.layout-compact #filter-actions,
.layout-compact #method-actions,
.layout-compact #detail-actions,
.layout-compact #note-actions {
    layout: vertical;
}

.layout-compact #filter-actions Button,
.layout-compact #method-actions Button,
.layout-compact #detail-actions Button,
.layout-compact #note-actions Button {
    margin: 0 0 1 0;
}

.is-hidden {
    display: none;
}
"""

TUI_THEMES = {
    TUI_THEME_NAME: Theme(
        name=TUI_THEME_NAME,
        primary="ansi_yellow",
        secondary="ansi_bright_blue",
        accent="ansi_bright_yellow",
        warning="ansi_bright_yellow",
        error="ansi_bright_red",
        success="ansi_bright_green",
        foreground="ansi_default",
        background="ansi_default",
        surface="ansi_default",
        panel="ansi_bright_black",
        dark=False,
        variables={
            "text": "ansi_default",
            "text-muted": "ansi_bright_black",
            "button-foreground": "ansi_default",
            "button-color-foreground": "ansi_black",
            "button-focus-text-style": "b",
        },
    )
}
