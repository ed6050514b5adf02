from .listing import Listing, PostedDate, Feed, FeedMetadata, JobType, Source, UNKNOWN_INSTANT
from .normalize import normalize_key, strip_emoji, absolutize_url, link_domain
from .date_parse import parse_posted_date
from .dedupe import dedup_key, dedupe_listings, sort_by_date_desc
from .errors import FeedError, FetchError, UnexpectedError

__all__ = [
    "Listing",
    "PostedDate",
    "Feed",
    "FeedMetadata",
    "JobType",
    "Source",
    "UNKNOWN_INSTANT",
    "normalize_key",
    "strip_emoji",
    "absolutize_url",
    "link_domain",
    "parse_posted_date",
    "dedup_key",
    "dedupe_listings",
    "sort_by_date_desc",
    "FeedError",
    "FetchError",
    "UnexpectedError",
]
