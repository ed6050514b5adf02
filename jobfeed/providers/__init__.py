from __future__ import annotations
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Protocol
from jobfeed.core.listing import JobType, Listing, Source
from jobfeed.providers.tables import Row

class SourceProvider(Protocol):
    name: Source
    job_type: JobType

    @property
    def url(self) -> str: ...

    def parse_rows(self, rows: Iterable[Row], *, now: Optional[datetime] = None) -> List[Listing]: ...

# Provider registry (populated below), keyed by source
REGISTRY: Dict[Source, SourceProvider] = {}

def register(provider: SourceProvider) -> None:
    REGISTRY[provider.name] = provider

def get(name: Source | str) -> SourceProvider:
    return REGISTRY[Source(name)]

from .scout import ScoutProvider  # noqa: E402
from .speedyapply import SpeedyApplyProvider  # noqa: E402
from .simplify import SimplifyProvider  # noqa: E402

register(ScoutProvider())
register(SpeedyApplyProvider())
register(SimplifyProvider())
