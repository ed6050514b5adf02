# jobfeed/cli.py
from __future__ import annotations

import argparse
import csv
import sys
from pathlib import Path
from typing import List, Optional

from jobfeed.config import configure_logging
from jobfeed.core.aggregate import collect_listings
from jobfeed.core.errors import FeedError
from jobfeed.core.listing import Feed, Listing, Source

CSV_COLUMNS = ["company", "title", "location", "salary", "job_type", "source", "date_posted", "link"]


def _listing_row(listing: Listing) -> dict:
    return {
        "company": listing.company,
        "title": listing.title,
        "location": listing.location,
        "salary": listing.salary,
        "job_type": listing.job_type.value,
        "source": listing.source.value,
        "date_posted": listing.date_posted.display,
        "link": listing.link,
    }


def write_csv(feed: Feed, path: str) -> None:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8", newline="") as fcsv:
        writer = csv.DictWriter(fcsv, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        for listing in feed.listings:
            writer.writerow(_listing_row(listing))


def write_json(feed: Feed, path: str) -> None:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(feed.model_dump_json(by_alias=True, indent=2), encoding="utf-8")


def _print_summary(feed: Feed, limit: int) -> None:
    parts = ", ".join(f"{name}={count}" for name, count in feed.metadata.sources.items())
    print(f"Fetched by source: {parts}")
    print(f"Unique listings: {feed.metadata.total}")
    if limit <= 0:
        return
    print("— newest listings —")
    for listing in feed.listings[:limit]:
        print(f"  {listing.date_posted.display:>10}  {listing.company} — {listing.title} [{listing.source.value}]")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Job Feed: merge curated internship/new-grad lists")
    parser.add_argument(
        "--sources",
        default="all",
        help="Comma-separated sources to fetch (scout,speedyapply,simplify). Default: all",
    )
    parser.add_argument("--limit", type=int, default=10, help="How many listings to preview (default 10)")
    parser.add_argument("--no-summary", action="store_true", help="Suppress counts and preview output")
    parser.add_argument("--csv-out", type=str, default=None, help="Write the merged feed as CSV to this path")
    parser.add_argument("--json-out", type=str, default=None, help="Write the merged feed as JSON to this path")
    args = parser.parse_args(argv)

    configure_logging()

    if args.sources.strip().lower() in ("all", "*", ""):
        sources = list(Source)
    else:
        try:
            sources = [Source(s.strip().lower()) for s in args.sources.split(",") if s.strip()]
        except ValueError as e:
            parser.error(str(e))

    try:
        feed = collect_listings(sources)
    except FeedError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    if not args.no_summary:
        _print_summary(feed, args.limit)
    if args.csv_out:
        write_csv(feed, args.csv_out)
        if not args.no_summary:
            print(f"Wrote {len(feed.listings)} rows to {args.csv_out}")
    if args.json_out:
        write_json(feed, args.json_out)
        if not args.no_summary:
            print(f"Wrote feed JSON to {args.json_out}")
    return 0


if __name__ == "__main__":
    # When executed as `python -m jobfeed.cli ...`
    sys.exit(main())
