"""Text width helpers for board columns, aware of wide (CJK, emoji) characters."""

from wcwidth import wcwidth


def display_width(text: str) -> int:
    """Return visual width of text accounting for wide/narrow characters."""
    width = 0
    for ch in text:
        w = wcwidth(ch)
        if w is None:
            w = 0
        width += max(0, w)
    return width


def trim_display(text: str, width: int) -> str:
    """Trim text so visible width doesn't exceed ``width``; an ellipsis marks the cut."""
    if display_width(text) <= width:
        return text
    acc = []
    used = 0
    for ch in text:
        w = max(0, wcwidth(ch) or 0)
        if used + w > width - 1:
            break
        acc.append(ch)
        used += w
    return "".join(acc) + "…" if width > 0 else ""


def pad_display(text: str, width: int) -> str:
    """Trim and pad with spaces to exact visible width."""
    trimmed = trim_display(text, width)
    trimmed_width = display_width(trimmed)
    if trimmed_width < width:
        trimmed += " " * (width - trimmed_width)
    return trimmed


__all__ = ["display_width", "pad_display", "trim_display"]
