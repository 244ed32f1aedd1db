"""Pull request table renderer."""

from __future__ import annotations

import unicodedata
from datetime import datetime, timezone
from typing import Sequence

from rich.console import Console

from myprs_core.formatting import display_width, fit, relative_time_ago
from myprs_core.layout import RULE_WIDTH, TITLE_WIDTH, UPDATED_WIDTH, column_gap
from myprs_core.models import Category, Issue
from myprs_core.panels import DEFAULT_STYLES, TableStyles, styled_line

NO_RESULTS = "No pull requests found"


def _emit(console: Console, line) -> None:
    console.print(line, soft_wrap=True, highlight=False)


def _flatten(text: str) -> str:
    # Tabs and other control characters become single spaces.
    return "".join(" " if unicodedata.category(ch) == "Cc" else ch for ch in text)


def render_section_header(console: Console, category: Category, account: str, styles: TableStyles) -> None:
    _emit(console, "")
    _emit(console, styled_line((f"{category.icon} {category.heading} {account}", styles.section)))
    _emit(console, "")


def render_table_header(console: Console, styles: TableStyles) -> None:
    gap = column_gap()
    title = "Title" + " " * (TITLE_WIDTH - display_width("Title"))
    updated = "Updated" + " " * (UPDATED_WIDTH - display_width("Updated"))
    _emit(console, styled_line((title, styles.header), (f"{gap}{updated}", styles.header), (f"{gap}URL", styles.header)))
    _emit(console, styled_line(("-" * RULE_WIDTH, styles.rule)))


def render_rows(console: Console, issues: Sequence[Issue], styles: TableStyles, now: datetime) -> None:
    gap = column_gap()
    for issue in issues:
        issue.validate()
        title = fit(_flatten(issue.title), TITLE_WIDTH)
        age = relative_time_ago(now, issue.updated_at) if issue.updated_at else "unknown"
        updated = fit(age, UPDATED_WIDTH)
        _emit(
            console,
            styled_line((title, styles.title), (f"{gap}{updated}", styles.time), (f"{gap}{issue.url}", styles.url)),
        )


def render(
    console: Console,
    category: Category | str,
    issues: Sequence[Issue],
    account: str,
    styles: TableStyles = DEFAULT_STYLES,
    now: datetime | None = None,
) -> None:
    cat = Category.parse(category)
    render_section_header(console, cat, account, styles)

    if not issues:
        _emit(console, styled_line((NO_RESULTS, styles.notice)))
        _emit(console, "")
        return

    render_table_header(console, styles)
    render_rows(console, issues, styles, now or datetime.now(timezone.utc))
    _emit(console, "")
