from __future__ import annotations

from datetime import datetime
import logging
from typing import Iterable, Iterator, List, Optional

from jobfeed.config import source_url
from jobfeed.core.date_parse import parse_posted_date
from jobfeed.core.listing import JobType, Listing, Source
from jobfeed.core.normalize import absolutize_url, strip_emoji
from jobfeed.providers.tables import Row, Table

log = logging.getLogger(__name__)


def cell_text(row: Row, idx: int) -> str:
    return row[idx].text.strip() if len(row) > idx else ""


def cell_href(row: Row, idx: int) -> Optional[str]:
    return row[idx].first_href if len(row) > idx else None


def row_href(row: Row) -> Optional[str]:
    """First hyperlink anywhere in the row, scanning cells left to right."""
    for cell in row:
        if cell.first_href:
            return cell.first_href
    return None


def iter_rows(tables: Iterable[Table]) -> Iterator[Row]:
    for table in tables:
        yield from table


def build_listing(
    *,
    source: Source,
    job_type: JobType,
    company: str,
    title: str,
    location: str,
    href: Optional[str],
    age: str,
    salary: str = "",
    now: Optional[datetime] = None,
) -> Optional[Listing]:
    """
    Normalize one row's raw fields into a Listing.

    Returns None when company, title or link can't be resolved; callers skip
    those rows silently.
    """
    company = strip_emoji(company)
    title = (title or "").strip()
    link = absolutize_url(href)
    if not company or not title or not link:
        return None
    return Listing(
        company=company,
        title=title,
        location=(location or "").strip(),
        link=link,
        date_posted=parse_posted_date(age, now=now),
        salary=(salary or "").strip(),
        job_type=job_type,
        source=source,
    )


class TableSourceProvider:
    """Shared plumbing for the curated README sources; subclasses own the row layout."""

    name: Source
    job_type: JobType

    @property
    def url(self) -> str:
        return source_url(self.name.value)

    def parse_rows(self, rows: Iterable[Row], *, now: Optional[datetime] = None) -> List[Listing]:
        raise NotImplementedError

    def _log_counts(self, kept: int, skipped: int) -> None:
        log.debug("curated-rows source=%s kept=%s skipped=%s", self.name.value, kept, skipped)
