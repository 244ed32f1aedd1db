"""Error kinds raised by the fetch/render pipeline."""

from __future__ import annotations


class PRCheckError(Exception):
    """Base class for every fatal error surfaced by the CLI."""


class ConfigError(PRCheckError):
    pass


class UnsupportedCategory(PRCheckError):
    def __init__(self, category: object):
        super().__init__(f"unsupported PR category: {category}")
        self.category = category


class IdentityResolutionFailed(PRCheckError):
    pass


class FetchFailed(PRCheckError):
    pass


class DeadlineExceeded(PRCheckError):
    pass


class InvalidIssueData(PRCheckError):
    pass
