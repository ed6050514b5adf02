"""
Recover tables from curated job-list READMEs.

The documents mix GitHub-flavoured pipe tables with raw ``<table>`` blocks, so
the markdown is rendered to HTML first and every table is read back out of the
resulting tree. Everything that is not a table is ignored.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.element import Tag
from markdown_it import MarkdownIt

from jobfeed.core.normalize import WS_RE


@dataclass(frozen=True)
class Hyperlink:
    href: str
    text: str


@dataclass(frozen=True)
class Cell:
    text: str
    hyperlinks: List[Hyperlink] = field(default_factory=list)

    @property
    def first_href(self) -> Optional[str]:
        return self.hyperlinks[0].href if self.hyperlinks else None


Row = List[Cell]
Table = List[Row]

# CommonMark closes an HTML block at the first blank line, so pipe tables
# wrapped in <details> or <div> still render.
_MD = MarkdownIt("commonmark").enable("table")


def _render(md: str) -> BeautifulSoup:
    html = _MD.render(md or "")
    # Prefer lxml for speed; fall back to the builtin parser
    try:
        return BeautifulSoup(html, "lxml")
    except FeatureNotFound:
        return BeautifulSoup(html, "html.parser")


def _cell(td: Tag) -> Cell:
    links = []
    for a in td.find_all("a"):
        if not isinstance(a, Tag):
            continue
        href = a.get("href")
        if isinstance(href, str) and href.strip():
            links.append(Hyperlink(href=href.strip(), text=a.get_text(" ", strip=True)))
    text = WS_RE.sub(" ", td.get_text(" ", strip=True)).strip()
    return Cell(text=text, hyperlinks=links)


def _body_rows(table: Tag) -> Table:
    rows: Table = []
    for tr in table.find_all("tr"):
        if not isinstance(tr, Tag):
            continue
        # rows of a nested table belong to that table
        if tr.find_parent("table") is not table:
            continue
        if tr.parent is not None and tr.parent.name == "thead":
            continue
        tds = [td for td in tr.find_all("td", recursive=False) if isinstance(td, Tag)]
        if not tds:
            continue
        rows.append([_cell(td) for td in tds])
    return rows


def extract_tables(md: str) -> List[Table]:
    """Return the body rows of every table in ``md``, grouped per table, in document order."""
    soup = _render(md)
    return [_body_rows(table) for table in soup.find_all("table") if isinstance(table, Tag)]
