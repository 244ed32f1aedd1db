"""Fixed column layout for the PR tables."""

from __future__ import annotations

TITLE_WIDTH = 33
UPDATED_WIDTH = 17
COLUMN_PADDING = 2
RULE_WIDTH = 80


def column_gap() -> str:
    return " " * COLUMN_PADDING
