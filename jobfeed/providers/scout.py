from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional

from jobfeed.core.listing import JobType, Listing, Source
from jobfeed.providers.base import TableSourceProvider, build_listing, cell_href, cell_text
from jobfeed.providers.tables import Row

# "Same company as the row above". The second form is the arrow mis-decoded as Latin-1.
DITTO_MARKERS = ("↳", "â†³")


class ScoutProvider(TableSourceProvider):
    """
    Internship list laid out as ``Company | Role | Location | Apply | Age``.

    Follow-up roles at the same employer use a ditto arrow in the company
    column instead of repeating the name.
    """

    name = Source.SCOUT
    job_type = JobType.INTERNSHIP

    def parse_rows(self, rows: Iterable[Row], *, now: Optional[datetime] = None) -> List[Listing]:
        out: List[Listing] = []
        skipped = 0
        prev_company = ""
        for row in rows:
            company = cell_text(row, 0)
            if company in DITTO_MARKERS:
                company = prev_company
            elif company:
                prev_company = company

            listing = build_listing(
                source=self.name,
                job_type=self.job_type,
                company=company,
                title=cell_text(row, 1),
                location=cell_text(row, 2),
                href=cell_href(row, 3),
                age=cell_text(row, 4),
                now=now,
            )
            if listing is None:
                skipped += 1
                continue
            out.append(listing)
        self._log_counts(len(out), skipped)
        return out
