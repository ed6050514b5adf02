from __future__ import annotations

from typing import Callable

from jobfeed.core.aggregate import collect_listings
from jobfeed.core.listing import Feed


def feed_collector() -> Callable[[], Feed]:
    """FastAPI dependency returning the callable that builds the feed.

    Tests override it through ``app.dependency_overrides`` to avoid the network.
    """
    return collect_listings


__all__ = ["feed_collector"]
