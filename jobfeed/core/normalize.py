from __future__ import annotations

import re
from urllib.parse import quote, urlsplit, urlunsplit

WS_RE = re.compile(r"\s+")
_KEY_STRIP_RE = re.compile(r"[^\w\s-]")

PLACEHOLDER_DOMAIN = "example.com"

# Code point ranges (inclusive) removed from company names. The astral block
# covers what UTF-16 sources write as \ud83c..\ud83e surrogate pairs.
EMOJI_RANGES: tuple[tuple[int, int], ...] = (
    (0x00A9, 0x00A9),    # copyright sign
    (0x00AE, 0x00AE),    # registered sign
    (0x2000, 0x3300),    # punctuation, arrows, dingbats, misc symbols, CJK symbols
    (0xFE00, 0xFE0F),    # variation selectors
    (0x1F000, 0x1FBFF),  # pictographs, emoticons, transport, supplemental symbols
)

_DEFAULT_PORTS = {"http": 80, "https": 443}

# Already-escaped sequences and URL delimiters are left alone.
_PATH_SAFE = "/%:@!$&'()*+,;="
_QUERY_SAFE = _PATH_SAFE + "?"


def normalize_key(text: str) -> str:
    """Comparison form of free text for dedup keys; never used for display."""
    s = WS_RE.sub(" ", (text or "").lower().strip())
    return _KEY_STRIP_RE.sub("", s)


def _is_emoji(ch: str) -> bool:
    cp = ord(ch)
    return any(lo <= cp <= hi for lo, hi in EMOJI_RANGES)


def strip_emoji(text: str) -> str:
    """Drop characters in :data:`EMOJI_RANGES` and trim what's left."""
    return "".join(ch for ch in (text or "") if not _is_emoji(ch)).strip()


def absolutize_url(ref: str | None) -> str:
    """
    Canonicalize an absolute URL; anything else comes back unchanged.

    Relative references are not resolved against a base URL.
    """
    if not ref:
        return ""
    ref = ref.strip()
    try:
        sp = urlsplit(ref)
        host = sp.hostname
        port = sp.port
    except ValueError:
        return ref
    if not sp.scheme or not host:
        return ref

    scheme = sp.scheme.lower()
    if not host.isascii():
        try:
            host = host.encode("idna").decode("ascii")
        except UnicodeError:
            pass  # not a valid IDN label; keep it as written
    netloc = host
    if ":" in host:
        netloc = f"[{host}]"
    if sp.username is not None:
        userinfo = sp.username
        if sp.password is not None:
            userinfo += f":{sp.password}"
        netloc = f"{userinfo}@{netloc}"
    if port is not None and _DEFAULT_PORTS.get(scheme) != port:
        netloc = f"{netloc}:{port}"

    path = sp.path
    if not path and scheme in _DEFAULT_PORTS:
        path = "/"
    return urlunsplit((
        scheme,
        netloc,
        quote(path, safe=_PATH_SAFE),
        quote(sp.query, safe=_QUERY_SAFE),
        quote(sp.fragment, safe=_QUERY_SAFE),
    ))


def link_domain(link: str) -> str:
    """Hostname of ``link`` without a leading ``www.``; placeholder if there is none."""
    try:
        host = urlsplit(link or "").hostname
    except ValueError:
        host = None
    if not host:
        return PLACEHOLDER_DOMAIN
    return re.sub(r"^www\.", "", host)
