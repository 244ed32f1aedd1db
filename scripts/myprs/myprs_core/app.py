"""gh-myprs application entrypoint."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime, timezone

from rich.console import Console

from myprs_core.collectors.aggregator import fetch_all
from myprs_core.collectors.github import GhCliClient, GitHubClient, fetch_identity
from myprs_core.errors import PRCheckError
from myprs_core.models import CATEGORIES, Category, Identity, IssueBatch
from myprs_core.panels import DEFAULT_STYLES, TableStyles
from myprs_core.panels.pulls import render
from myprs_core.settings import resolve_settings

logger = logging.getLogger("gh_myprs")


def configure_logging(level: str) -> None:
    root = logging.getLogger("gh_myprs")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False


def collect(client: GitHubClient, settings: dict) -> tuple[Identity, dict[Category, IssueBatch]]:
    """Resolve the account and fetch every category, failing on the first error."""
    identity = fetch_identity(client, timeout=settings["identity_timeout_seconds"])
    logger.info("Authenticated as %s", identity.login)

    batches = fetch_all(client, identity.login, CATEGORIES, timeout=settings["fetch_timeout_seconds"])
    for batch in batches:
        if batch.failed:
            raise batch.error
    return identity, {batch.category: batch for batch in batches}


def _json_output(identity: Identity, by_category: dict[Category, IssueBatch]) -> str:
    for cat in CATEGORIES:
        for issue in by_category[cat].issues:
            issue.validate()
    payload = {
        "user": identity.login,
        "collected_at": datetime.now(timezone.utc).isoformat(),
        "categories": {
            cat.value: [issue.to_dict() for issue in by_category[cat].issues] for cat in CATEGORIES
        },
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def run(
    client: GitHubClient,
    console: Console,
    settings: dict,
    styles: TableStyles = DEFAULT_STYLES,
    now: datetime | None = None,
    as_json: bool = False,
) -> int:
    try:
        identity, by_category = collect(client, settings)
        if as_json:
            console.out(_json_output(identity, by_category), highlight=False)
            return 0
        for cat in CATEGORIES:
            render(console, cat, by_category[cat].issues, identity.login, styles, now=now)
    except PRCheckError as exc:
        logger.debug("Run aborted", exc_info=True)
        logger.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List your open pull requests and pending review requests")
    parser.add_argument("--json", action="store_true", help="Emit JSON payload instead of tables")
    parser.add_argument("--config", help="Optional JSON config file (default: $GH_MYPRS_CONFIG)")
    parser.add_argument("--timeout", type=float, help="Seconds allowed for all PR searches")
    parser.add_argument("--hostname", help="GitHub host to query (GitHub Enterprise)")
    parser.add_argument("--log-level", help="Logging level: DEBUG|INFO|WARNING|ERROR")
    args = parser.parse_args(argv)

    try:
        settings = resolve_settings(
            args.config,
            {
                "fetch_timeout_seconds": args.timeout,
                "hostname": args.hostname,
                "log_level": args.log_level,
            },
        )
    except PRCheckError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    configure_logging(settings["log_level"])
    client = GhCliClient(hostname=settings["hostname"])
    return run(client, Console(), settings, as_json=args.json)


if __name__ == "__main__":
    raise SystemExit(main())
