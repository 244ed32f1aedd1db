"""Panel rendering helpers."""

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text


@dataclass(frozen=True)
class TableStyles:
    section: str = "bold bright_magenta"
    header: str = "bold green"
    title: str = "cyan"
    time: str = "yellow"
    url: str = "underline blue"
    rule: str = "bright_black"
    notice: str = "yellow"


DEFAULT_STYLES = TableStyles()


def styled_line(*parts: tuple[str, str]) -> Text:
    """Join ``(text, style)`` pairs into one Text line without markup parsing."""
    line = Text()
    for content, style in parts:
        line.append(content, style=style)
    return line
