"""Shared text and time formatting helpers for the PR tables."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from rich.cells import cell_len

ELLIPSIS = "..."


def char_width(ch: str) -> int:
    """Terminal cell width of a single codepoint (0, 1 or 2)."""
    return cell_len(ch)


def display_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


def fit(text: str, width: int) -> str:
    """Truncate or pad ``text`` to exactly ``width`` terminal columns.

    Text that already fits is right-padded with spaces. Longer text keeps as
    many leading codepoints as fit alongside a trailing ``...`` and is then
    padded, so a double-width glyph that would straddle the boundary is
    dropped rather than split.
    """
    current = display_width(text)
    if current <= width:
        return text + " " * (width - current)

    kept: list[str] = []
    used = 0
    reserve = len(ELLIPSIS)
    for ch in text:
        w = char_width(ch)
        if used + w + reserve > width:
            break
        kept.append(ch)
        used += w

    result = "".join(kept) + ELLIPSIS
    return result + " " * max(0, width - display_width(result))


def _pluralize(amount: int, unit: str) -> str:
    if amount == 1:
        return f"{amount} {unit}"
    return f"{amount} {unit}s"


def _about(amount: int, unit: str) -> str:
    return f"about {_pluralize(amount, unit)} ago"


def relative_time_ago(now: datetime, then: datetime) -> str:
    ago = now - then
    if ago < timedelta(minutes=1):
        return "less than a minute ago"
    if ago < timedelta(hours=1):
        return _about(int(ago.total_seconds() // 60), "minute")

    hours = int(ago.total_seconds() // 3600)
    if ago < timedelta(hours=24):
        return _about(hours, "hour")
    if ago < timedelta(days=30):
        return _about(hours // 24, "day")
    if ago < timedelta(days=365):
        return _about(hours // 24 // 30, "month")
    return _about(hours // 24 // 365, "year")


def parse_iso_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    text = value.strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
