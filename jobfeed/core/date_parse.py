from __future__ import annotations

from datetime import datetime, timedelta
import re

from jobfeed.core.listing import UNKNOWN_INSTANT, PostedDate

MONTHS = {
    'jan': 1,
    'feb': 2,
    'mar': 3,
    'apr': 4,
    'may': 5,
    'jun': 6,
    'jul': 7,
    'aug': 8,
    'sep': 9,
    'sept': 9,
    'oct': 10,
    'nov': 11,
    'dec': 12,
}

AGE_DAYS = re.compile(r"(\d+)\s*d", re.I)
MONTH_DAY = re.compile(r"^(\w{3,})\.?\s+(\d{1,2})$")
US_SLASH = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{2,4})$")

# Tried in order by the generic calendar parse.
CALENDAR_FORMATS = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%m/%d/%Y",
    "%Y/%m/%d",
)


def _midnight(dt: datetime) -> datetime:
    return dt.replace(hour=0, minute=0, second=0, microsecond=0, tzinfo=None)


def format_us_date(dt: datetime) -> str:
    return f"{dt.month:02d}/{dt.day:02d}/{dt.year:04d}"


def _parse_calendar(raw: str, now: datetime) -> datetime | None:
    try:
        return _midnight(datetime.fromisoformat(raw.replace("Z", "+00:00")))
    except ValueError:
        pass

    for fmt in CALENDAR_FORMATS:
        try:
            return datetime.strptime(raw, fmt)
        except ValueError:
            continue

    m = MONTH_DAY.match(raw)
    if m:
        month = MONTHS.get(m.group(1).lower()[:4]) or MONTHS.get(m.group(1).lower()[:3])
        if month is None:
            return None
        day = int(m.group(2))
        try:
            candidate = datetime(now.year, month, day)
        except ValueError:
            return None
        if candidate - now > timedelta(days=30):
            try:
                candidate = datetime(now.year - 1, month, day)
            except ValueError:
                return None
        return candidate
    return None


def _parse_us_slash(raw: str) -> datetime | None:
    m = US_SLASH.match(raw)
    if not m:
        return None
    month, day, year = m.groups()
    if len(year) == 2:
        year = f"20{year}"
    elif len(year) != 4:
        return None
    try:
        return datetime(int(year), int(month), int(day))
    except ValueError:
        return None


def resolve_date(text: str, *, now: datetime | None = None) -> datetime | None:
    """Resolve a free-form age/date string to a midnight-aligned datetime.

    Order matters and the first match wins:
      1. "<N>d" anywhere in the text (``3d``, ``12 d``)  -> today minus N days
      2. "today"                                        -> today
      3. "yesterday"                                    -> today minus 1 day
      4. calendar dates (ISO 8601, "Sep 5, 2025", "9/5/2025", "Sep 5")
      5. strict M/D/YY or M/D/YYYY, two-digit years read as 20YY
    Returns None when nothing matches.
    """
    today = _midnight(now or datetime.now())
    raw = (text or "").strip()
    if not raw:
        return None

    m = AGE_DAYS.search(raw)
    if m:
        # ages past the calendar range (or past int parsing limits) are unknown
        try:
            return today - timedelta(days=int(m.group(1)))
        except (OverflowError, ValueError):
            return None

    lowered = raw.lower()
    if lowered == "today":
        return today
    if lowered == "yesterday":
        return today - timedelta(days=1)

    parsed = _parse_calendar(raw, today)
    if parsed is not None:
        return parsed

    return _parse_us_slash(raw)


def parse_posted_date(text: str, *, now: datetime | None = None) -> PostedDate:
    resolved = resolve_date(text, now=now)
    if resolved is None:
        return PostedDate(display=text or "", instant=UNKNOWN_INSTANT)
    return PostedDate(display=format_us_date(resolved), instant=resolved)
