"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "text.dimmer": "#6d717a",
        "header": "#ffb347 bold",
        "header.focused": "#ffb347 bold underline",
        "border": "#4b525a",
        "selected": "bg:#3b3b3b #d7dfe6 bold",
        "card.new": "#9ad974",
        "card.checked": "#9ad974 bold",
        "priority.critical": "#ff5156 bold",
        "priority.high": "#f9ac60 bold",
        "priority.medium": "#e5c07b",
        "priority.low": "#9ad974",
        "tag": "#61afef",
        "dialog": "bg:#2c2f33 #e8eaec",
        "dialog.title": "bg:#2c2f33 #ff6b6b bold",
        "dialog.button": "bg:#2c2f33 #97a0a9",
        "dialog.button.focused": "bg:#e06c75 #1e1e1e bold",
        "status": "#97a0a9",
        "status.ok": "#9ad974 bold",
        "status.fail": "#e06c75 bold",
        "editor": "bg:#262a2e #e8eaec",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "text.dimmer": "#6f757d",
        "header": "#ffb347 bold",
        "header.focused": "#ffb347 bold underline",
        "border": "#5a6169",
        "selected": "bg:#3d4047 #e8eaec bold",
        "card.new": "#b8f171",
        "card.checked": "#b8f171 bold",
        "priority.critical": "#ff6b6b bold",
        "priority.high": "#f9ac60 bold",
        "priority.medium": "#f0c674",
        "priority.low": "#b8f171",
        "tag": "#7cc4ff",
        "dialog": "bg:#1f2226 #ffffff",
        "dialog.title": "bg:#1f2226 #ff6b6b bold",
        "dialog.button": "bg:#1f2226 #a7b0ba",
        "dialog.button.focused": "bg:#ff6b6b #000000 bold",
        "status": "#a7b0ba",
        "status.ok": "#b8f171 bold",
        "status.fail": "#ff6b6b bold",
        "editor": "bg:#1f2226 #ffffff",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)
