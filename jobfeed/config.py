"""Runtime settings for Job Feed.

Everything is read from environment variables at call time so tests and
long-running processes pick up changes without re-importing.

Environment variables (optional)
--------------------------------
JOBFEED_FETCH_TIMEOUT (float seconds, default 15)
JOBFEED_SCOUT_URL / JOBFEED_SPEEDYAPPLY_URL / JOBFEED_SIMPLIFY_URL
    Override the upstream README for one source.
JOBFEED_LOG_LEVEL (default "INFO")
JOBFEED_CORS_ORIGINS (comma separated, default "*")
JOBFEED_DOTENV (path to .env, default ".env")
"""
from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

_ = load_dotenv(dotenv_path=os.getenv("JOBFEED_DOTENV", ".env"))

USER_AGENT = "jobs-aggregator/1.0"
DEFAULT_FETCH_TIMEOUT = 15.0

DEFAULT_SOURCE_URLS = {
    "scout": "https://raw.githubusercontent.com/cvrve/Summer2025-Internships/dev/README.md",
    "speedyapply": "https://raw.githubusercontent.com/speedyapply/2025-SWE-College-Jobs/refs/heads/main/README.md",
    "simplify": "https://raw.githubusercontent.com/SimplifyJobs/New-Grad-Positions/refs/heads/dev/README.md",
}


def fetch_timeout() -> float:
    v = os.getenv("JOBFEED_FETCH_TIMEOUT")
    if not v:
        return DEFAULT_FETCH_TIMEOUT
    try:
        return float(v)
    except ValueError:
        return DEFAULT_FETCH_TIMEOUT


def source_url(name: str) -> str:
    return os.getenv(f"JOBFEED_{name.upper()}_URL") or DEFAULT_SOURCE_URLS[name]


def cors_origins() -> list[str]:
    raw = os.getenv("JOBFEED_CORS_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]


def log_level() -> int:
    name = os.getenv("JOBFEED_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
