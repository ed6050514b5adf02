from __future__ import annotations
from typing import AbstractSet, Iterable, List, Optional, Set
from .listing import Listing
from .normalize import normalize_key, link_domain

def dedup_key(listing: Listing) -> str:
    # Same posting across lists: company + title + the domain it links to
    return f"{normalize_key(listing.company)}|{normalize_key(listing.title)}|{link_domain(listing.link)}"

def dedupe_listings(listings: Iterable[Listing], seen: Optional[AbstractSet[str]] = None) -> List[Listing]:
    """Keep the first listing for each dedup key, dropping later ones whole.

    ``seen`` pre-seeds the key set; it is copied, never mutated.
    """
    keys: Set[str] = set(seen or ())
    unique: List[Listing] = []
    for listing in listings:
        key = dedup_key(listing)
        if key in keys:
            continue
        keys.add(key)
        unique.append(listing)
    return unique

def sort_by_date_desc(listings: Iterable[Listing]) -> List[Listing]:
    """Newest first; unknown dates land at the bottom. Stable for ties."""
    return sorted(listings, key=lambda item: item.date_posted.instant, reverse=True)
