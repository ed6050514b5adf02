from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional

from jobfeed.core.listing import JobType, Listing, Source
from jobfeed.providers.base import TableSourceProvider, build_listing, cell_text, row_href
from jobfeed.providers.tables import Row


class SimplifyProvider(TableSourceProvider):
    # Company | Role | Location | Salary | Age, with the apply link in whichever
    # column the README currently puts it.
    name = Source.SIMPLIFY
    job_type = JobType.NEWGRAD

    def parse_rows(self, rows: Iterable[Row], *, now: Optional[datetime] = None) -> List[Listing]:
        out: List[Listing] = []
        skipped = 0
        for row in rows:
            listing = build_listing(
                source=self.name,
                job_type=self.job_type,
                company=cell_text(row, 0),
                title=cell_text(row, 1),
                location=cell_text(row, 2),
                href=row_href(row),
                age=cell_text(row, 4),
                salary=cell_text(row, 3),
                now=now,
            )
            if listing is None:
                skipped += 1
                continue
            out.append(listing)
        self._log_counts(len(out), skipped)
        return out
