"""
Thin script entry so the feed can be run from a checkout:
  python job_feed.py --csv-out output/listings.csv
The installed console script is `job-feed = jobfeed.cli:main`.
"""
import sys

from jobfeed.cli import main

if __name__ == "__main__":
    sys.exit(main())
