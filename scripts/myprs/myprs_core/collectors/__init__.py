"""Collector helpers and package exports."""

from __future__ import annotations

import time


def deadline_after(seconds: float) -> float:
    return time.monotonic() + seconds


def remaining(deadline: float) -> float:
    return max(0.0, deadline - time.monotonic())


def first_line(text: str | None, default: str) -> str:
    lines = (text or "").strip().splitlines()
    return lines[0] if lines else default
