from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional

from jobfeed.core.listing import JobType, Listing, Source
from jobfeed.providers.base import TableSourceProvider, build_listing, cell_href, cell_text
from jobfeed.providers.tables import Row

CURRENCY_SYMBOLS = ("$",)


class SpeedyApplyProvider(TableSourceProvider):
    """
    Internship list whose sections use two table shapes:
      - ``Company | Position | Location | Salary | Posting | Age``
      - ``Company | Position | Location | Posting | Age``
    The salary column is detected per row from the currency symbol in column 3.
    """

    name = Source.SPEEDYAPPLY
    job_type = JobType.INTERNSHIP

    def parse_rows(self, rows: Iterable[Row], *, now: Optional[datetime] = None) -> List[Listing]:
        out: List[Listing] = []
        skipped = 0
        for row in rows:
            col3 = cell_text(row, 3)
            if any(sym in col3 for sym in CURRENCY_SYMBOLS):
                salary, link_idx, age_idx = col3, 4, 5
            else:
                salary, link_idx, age_idx = "", 3, 4

            listing = build_listing(
                source=self.name,
                job_type=self.job_type,
                company=cell_text(row, 0),
                title=cell_text(row, 1),
                location=cell_text(row, 2),
                href=cell_href(row, link_idx),
                age=cell_text(row, age_idx),
                salary=salary,
                now=now,
            )
            if listing is None:
                skipped += 1
                continue
            out.append(listing)
        self._log_counts(len(out), skipped)
        return out
