"""Shared model contracts for the fetch/render data flow."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from myprs_core.errors import InvalidIssueData, UnsupportedCategory


class Category(str, Enum):
    CREATED = "created"
    REVIEW_REQUESTED = "review-requested"

    @property
    def icon(self) -> str:
        return CATEGORY_ICONS[self]

    @property
    def heading(self) -> str:
        return CATEGORY_HEADINGS[self]

    @classmethod
    def parse(cls, value: "Category | str") -> "Category":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedCategory(value) from None


CATEGORY_ICONS = {
    Category.CREATED: "🔨",
    Category.REVIEW_REQUESTED: "👀",
}

CATEGORY_HEADINGS = {
    Category.CREATED: "Pull Requests Created by",
    Category.REVIEW_REQUESTED: "Review Requests for",
}

# Canonical render order.
CATEGORIES: tuple[Category, ...] = (Category.CREATED, Category.REVIEW_REQUESTED)


@dataclass(frozen=True)
class Identity:
    login: str

    def __str__(self) -> str:
        return self.login


@dataclass(frozen=True)
class Issue:
    # title/url stay optional so validate() can reject them.
    title: str | None
    url: str | None
    updated_at: datetime | None

    def validate(self) -> None:
        if self.title is None or self.url is None:
            raise InvalidIssueData("received invalid issue data from GitHub")

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "url": self.url,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


@dataclass(frozen=True)
class IssueBatch:
    category: Category
    issues: tuple[Issue, ...] = field(default_factory=tuple)
    error: Exception | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None
