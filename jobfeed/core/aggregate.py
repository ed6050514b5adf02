"""
Fetch the curated READMEs concurrently and merge them into one feed.

Each source runs fetch -> extract tables -> parse rows on its own worker and
shares nothing with the others. The merge waits for all of them, then
concatenates in fixed source order, drops duplicates and sorts by date. Any
failing source fails the whole aggregation; no partial feed is returned.
"""
from __future__ import annotations

import concurrent.futures
import logging
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional

from jobfeed.core.dedupe import dedupe_listings, sort_by_date_desc
from jobfeed.core.errors import FeedError, UnexpectedError
from jobfeed.core.listing import Feed, FeedMetadata, Listing, Source
from jobfeed.providers import REGISTRY, SourceProvider
from jobfeed.providers.base import iter_rows
from jobfeed.providers.fetch import fetch_markdown
from jobfeed.providers.tables import extract_tables

log = logging.getLogger(__name__)

Fetcher = Callable[[str], str]


def run_pipeline(
    provider: SourceProvider,
    *,
    fetch: Fetcher = fetch_markdown,
    now: Optional[datetime] = None,
) -> List[Listing]:
    source = provider.name.value
    md = fetch(provider.url)

    try:
        tables = extract_tables(md)
    except Exception as e:
        raise UnexpectedError(source, "extract", e) from e

    try:
        return provider.parse_rows(iter_rows(tables), now=now)
    except Exception as e:
        raise UnexpectedError(source, "parse", e) from e


def _selected(sources: Optional[Iterable[Source | str]]) -> List[Source]:
    if sources is None:
        return list(Source)
    wanted = {Source(s) for s in sources}
    # Always run in declaration order, whatever order the caller gave
    return [s for s in Source if s in wanted]


def collect_listings(
    sources: Optional[Iterable[Source | str]] = None,
    *,
    fetch: Fetcher = fetch_markdown,
    now: Optional[datetime] = None,
) -> Feed:
    """
    Build the merged, de-duplicated, newest-first feed.

    ``now`` is shared by every source so relative ages ("3d") resolve against
    the same day. Raises FetchError / UnexpectedError if any source fails.
    """
    now = now or datetime.now()
    selected = _selected(sources)

    results: Dict[Source, List[Listing]] = {}
    failure: Optional[BaseException] = None
    with concurrent.futures.ThreadPoolExecutor(max_workers=max(len(selected), 1)) as ex:
        futs = {
            src: ex.submit(run_pipeline, REGISTRY[src], fetch=fetch, now=now)
            for src in selected
        }
        # Join in source order so the reported failure is deterministic
        for src, fut in futs.items():
            try:
                results[src] = fut.result()
            except FeedError as e:
                failure = failure or e
            except Exception as e:
                failure = failure or UnexpectedError(src.value, "fetch", e)

    if failure is not None:
        log.error("feed aggregation aborted: %s", failure)
        raise failure

    combined: List[Listing] = []
    for src in selected:
        combined.extend(results[src])

    merged = sort_by_date_desc(dedupe_listings(combined))
    counts = {src.count_key: len(results.get(src, [])) for src in Source}
    log.info(
        "feed sources=%s combined=%s total=%s",
        " ".join(f"{k}={v}" for k, v in counts.items()),
        len(combined),
        len(merged),
    )
    return Feed(listings=merged, metadata=FeedMetadata(total=len(merged), sources=counts))
