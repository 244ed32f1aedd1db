"""Concurrent per-category PR search under one shared deadline."""

from __future__ import annotations

import logging
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Iterable

from myprs_core import queries
from myprs_core.collectors import deadline_after, remaining
from myprs_core.collectors.github import GitHubClient, search_issues
from myprs_core.errors import DeadlineExceeded, FetchFailed
from myprs_core.models import Category, IssueBatch

logger = logging.getLogger("gh_myprs.aggregator")


def fetch_category(client: GitHubClient, account: str, category: Category, deadline: float) -> IssueBatch:
    """Run one category's search and fold any failure into the batch."""
    try:
        query = queries.build(category, account)
        issues = search_issues(client, query, timeout=remaining(deadline))
    except DeadlineExceeded as exc:
        return IssueBatch(category=category, error=exc)
    except Exception as exc:  # noqa: BLE001
        return IssueBatch(category=category, error=FetchFailed(f"failed to fetch pull requests: {exc}"))
    return IssueBatch(category=category, issues=tuple(issues))


def fetch_all(
    client: GitHubClient,
    account: str,
    categories: Iterable[Category],
    timeout: float,
) -> list[IssueBatch]:
    """Fetch every category concurrently and return batches in arrival order.

    Collection stops at the first failed batch; sibling searches are left to
    finish in the background and their results are dropped. Categories still
    outstanding when ``timeout`` elapses are reported as ``DeadlineExceeded``.
    """
    cats = [Category.parse(c) for c in categories]
    if not cats:
        return []

    deadline = deadline_after(timeout)
    executor = ThreadPoolExecutor(max_workers=len(cats), thread_name_prefix="myprs-fetch")
    pending: dict[Future, Category] = {
        executor.submit(fetch_category, client, account, cat, deadline): cat for cat in cats
    }
    logger.info("Fetching %d categories for %s", len(cats), account)

    batches: list[IssueBatch] = []
    try:
        while pending:
            done, _ = wait(pending, timeout=remaining(deadline), return_when=FIRST_COMPLETED)
            if not done:
                break
            for future in done:
                cat = pending.pop(future)
                batch = future.result()
                batches.append(batch)
                if batch.failed:
                    logger.warning("Fetching %s failed: %s", cat.value, batch.error)
                    return batches
                logger.info("Fetched %d %s PRs", len(batch.issues), cat.value)

        for future, cat in pending.items():
            future.cancel()
            logger.warning("Deadline exceeded fetching %s PRs", cat.value)
            batches.append(
                IssueBatch(
                    category=cat,
                    error=DeadlineExceeded(f"fetching {cat.value} PRs did not finish within {timeout:g}s"),
                )
            )
        return batches
    finally:
        executor.shutdown(wait=False, cancel_futures=True)
