"""Search query construction per PR category."""

from __future__ import annotations

from myprs_core.models import Category

BASE_QUERY = "is:open+is:pr+archived:false"

QUERY_QUALIFIERS = {
    Category.CREATED: "author",
    Category.REVIEW_REQUESTED: "user-review-requested",
}


def build(category: Category | str, account: str) -> str:
    """Return the `search/issues` query for ``category`` scoped to ``account``.

    Filters are joined with a literal ``+`` so the result can be dropped into
    the URL query string as-is.
    """
    cat = Category.parse(category)
    if not account:
        raise ValueError("account must be non-empty")
    return f"{BASE_QUERY}+{QUERY_QUALIFIERS[cat]}:{account}"
