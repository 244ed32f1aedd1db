"""GitHub REST access through the gh CLI."""

from __future__ import annotations

import json
import logging
import subprocess
from typing import Any, Protocol

from myprs_core.collectors import first_line
from myprs_core.errors import DeadlineExceeded, FetchFailed, IdentityResolutionFailed, PRCheckError
from myprs_core.formatting import parse_iso_timestamp
from myprs_core.models import Identity, Issue

GITHUB_API_VERSION = "2022-11-28"
GITHUB_ACCEPT_HEADER = "application/vnd.github+json"

logger = logging.getLogger("gh_myprs.github")


class GitHubClient(Protocol):
    def get(self, path: str, timeout: float | None = None) -> Any:
        """Return the decoded JSON body for ``path`` or raise a PRCheckError."""
        ...


class GhCliClient:
    """GitHubClient backed by ``gh api``, reusing the CLI's stored auth."""

    def __init__(self, hostname: str | None = None, executable: str = "gh"):
        self.hostname = hostname
        self.executable = executable

    def command(self, path: str) -> list[str]:
        cmd = [self.executable, "api"]
        if self.hostname:
            cmd.extend(["--hostname", self.hostname])
        cmd.extend(
            [
                "-H",
                f"Accept: {GITHUB_ACCEPT_HEADER}",
                "-H",
                f"X-GitHub-Api-Version: {GITHUB_API_VERSION}",
                path,
            ]
        )
        return cmd

    def get(self, path: str, timeout: float | None = None) -> Any:
        logger.debug("GET %s (timeout=%s)", path, timeout)
        try:
            proc = subprocess.run(
                self.command(path),
                capture_output=True,
                text=True,
                timeout=timeout,
                check=False,
            )
        except FileNotFoundError:
            raise FetchFailed("gh CLI not installed") from None
        except OSError as exc:
            raise FetchFailed(f"could not run gh: {exc}") from None
        except subprocess.TimeoutExpired:
            raise DeadlineExceeded(f"request for {path} timed out") from None

        if proc.returncode != 0:
            raise FetchFailed(first_line(proc.stderr or proc.stdout, "gh api request failed"))

        try:
            return json.loads(proc.stdout)
        except json.JSONDecodeError:
            raise FetchFailed("invalid JSON from gh") from None


def fetch_identity(client: GitHubClient, timeout: float | None = None) -> Identity:
    try:
        payload = client.get("user", timeout=timeout)
    except PRCheckError as exc:
        raise IdentityResolutionFailed(f"failed to fetch user info: {exc}") from exc

    login = payload.get("login") if isinstance(payload, dict) else None
    if not login:
        raise IdentityResolutionFailed("received empty username from GitHub")
    return Identity(str(login))


def _decode_issue(item: dict) -> Issue:
    title = item.get("title")
    url = item.get("html_url")
    return Issue(
        title=str(title) if title is not None else None,
        url=str(url) if url is not None else None,
        updated_at=parse_iso_timestamp(item.get("updated_at")),
    )


def search_issues(client: GitHubClient, query: str, timeout: float | None = None) -> list[Issue]:
    payload = client.get(f"search/issues?q={query}", timeout=timeout)
    if not isinstance(payload, dict):
        raise FetchFailed("unexpected search response from GitHub")
    items = payload.get("items")
    if items is None:
        items = []
    if not isinstance(items, list):
        raise FetchFailed("unexpected search response from GitHub")
    return [_decode_issue(item if isinstance(item, dict) else {}) for item in items]
