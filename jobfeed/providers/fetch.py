from __future__ import annotations

import logging
from typing import Optional

import requests

from jobfeed.config import USER_AGENT, fetch_timeout
from jobfeed.core.errors import FetchError

log = logging.getLogger(__name__)


def fetch_markdown(
    url: str,
    *,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> str:
    """GET one upstream README. Single attempt; any failure raises FetchError."""
    timeout = fetch_timeout() if timeout is None else timeout
    getter = session.get if session is not None else requests.get
    log.debug("GET %s", url)
    try:
        resp = getter(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
    except requests.RequestException as e:
        log.warning("Fetch failed for %s (%s)", url, e)
        raise FetchError(url, cause=e) from e
    if not 200 <= resp.status_code < 300:
        log.warning("Fetch failed for %s (status=%s)", url, resp.status_code)
        raise FetchError(url, status=resp.status_code)
    # READMEs are UTF-8; without a declared charset requests would guess Latin-1
    if "charset" not in resp.headers.get("Content-Type", "").lower():
        resp.encoding = "utf-8"
    return resp.text
