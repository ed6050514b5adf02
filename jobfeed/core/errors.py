from __future__ import annotations

from typing import Optional


class FeedError(Exception):
    """Base class for failures that abort a feed aggregation."""


class FetchError(FeedError):
    """An upstream document could not be retrieved (status, network, timeout)."""

    def __init__(self, url: str, status: Optional[int] = None, cause: Optional[BaseException] = None):
        self.url = url
        self.status = status
        self.cause = cause
        reason = status if status is not None else (cause or "unknown error")
        super().__init__(f"Failed {url}: {reason}")


class UnexpectedError(FeedError):
    """Anything else that broke one source's pipeline, tagged with where it broke."""

    def __init__(self, source: str, stage: str, cause: BaseException):
        self.source = source
        self.stage = stage
        self.cause = cause
        super().__init__(f"{source} pipeline failed during {stage}: {cause}")
