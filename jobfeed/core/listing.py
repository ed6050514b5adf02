from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

# Stands in for an unparseable date; sorts after every real date.
UNKNOWN_INSTANT = datetime.min


class JobType(str, Enum):
    INTERNSHIP = "internship"
    NEWGRAD = "newgrad"


class Source(str, Enum):
    # Declaration order is the concatenation (and dedupe precedence) order.
    SCOUT = "scout"
    SPEEDYAPPLY = "speedyapply"
    SIMPLIFY = "simplify"

    @property
    def count_key(self) -> str:
        """Key for this source in the feed metadata counts."""
        return METADATA_KEYS[self]


# Consumers of the feed metadata expect camelCase keys.
METADATA_KEYS = {
    Source.SCOUT: "scout",
    Source.SPEEDYAPPLY: "speedyApply",
    Source.SIMPLIFY: "simplify",
}


class PostedDate(BaseModel):
    """A posting date as shown to users plus the instant used for ordering.

    ``display`` is ``MM/DD/YYYY`` when the source text could be resolved, and
    the raw source text otherwise (``instant`` is then :data:`UNKNOWN_INSTANT`).
    """

    model_config = ConfigDict(frozen=True)

    display: str
    instant: datetime = UNKNOWN_INSTANT

    @property
    def is_unknown(self) -> bool:
        return self.instant == UNKNOWN_INSTANT


class Listing(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    company: str
    title: str
    location: str = ""
    link: str
    date_posted: PostedDate
    salary: str = ""
    job_type: JobType
    source: Source

    @field_validator("company", "title", "link")
    @classmethod
    def _required(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be blank")
        return v


class FeedMetadata(BaseModel):
    total: int
    sources: dict[str, int]


class Feed(BaseModel):
    listings: list[Listing]
    metadata: FeedMetadata
