# core/extract.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

import lxml.html
from bs4 import BeautifulSoup

from core.errors import ExtractionError

CounterRow = List[str]
CounterTable = List[CounterRow]


class Document:
    """
    Snapshot of one fetched page. CSS queries go through BeautifulSoup,
    XPath queries through lxml; both parse lazily from the same HTML.
    """

    def __init__(self, html: str):
        self.html = html or ""
        self._soup: Optional[BeautifulSoup] = None
        self._tree = None

    @property
    def soup(self) -> BeautifulSoup:
        if self._soup is None:
            self._soup = BeautifulSoup(self.html, "html.parser")
        return self._soup

    @property
    def tree(self):
        if self._tree is None:
            if not self.html.strip():
                raise ExtractionError("empty document")
            self._tree = lxml.html.fromstring(self.html)
        return self._tree

    def select_rows(self, selector: str):
        return self.soup.select(selector)

    def css_text(self, selector: str) -> Optional[str]:
        el = self.soup.select_one(selector)
        return None if el is None else el.get_text()

    def xpath_text(self, xpath: str) -> Optional[str]:
        found = self.tree.xpath(xpath)
        if not found:
            return None
        node = found[0]
        if isinstance(node, str):
            return str(node)
        return node.text_content()


def _cell_text(td) -> str:
    return (td.get_text() or "").strip()


# ---------- identity ----------

@dataclass(frozen=True)
class CssIdentity:
    """Serial from the first element matching a CSS selector, trimmed."""
    selector: str

    def extract(self, doc: Document) -> str:
        return (doc.css_text(self.selector) or "").strip()


@dataclass(frozen=True)
class XPathIdentity:
    # text is compared as found on the page, untrimmed
    xpath: str

    def extract(self, doc: Document) -> str:
        return doc.xpath_text(self.xpath) or ""


@dataclass(frozen=True)
class QuotedValueIdentity:
    """
    Serial from a source line such as `serialNumber: "ABC123",`: the text
    between the first pair of double quotes.
    """
    xpath: str

    def extract(self, doc: Document) -> str:
        text = doc.xpath_text(self.xpath) or ""
        parts = text.split('"')
        return parts[1] if len(parts) > 1 else ""


# ---------- counters ----------

@dataclass(frozen=True)
class LabelFilter:
    """Keep table rows whose first cell is one of `labels`."""
    row_selector: str
    labels: Tuple[str, ...]

    def label_row(self) -> Optional[CounterRow]:
        return None

    def extract(self, doc: Document) -> CounterTable:
        wanted = set(self.labels)
        data: CounterTable = []
        for tr in doc.select_rows(self.row_selector):
            tds = tr.find_all("td")
            if not tds:
                continue
            name = _cell_text(tds[0])
            if name in wanted:
                data.append([name, *(_cell_text(td) for td in tds[1:])])
        return data


@dataclass(frozen=True)
class ColumnCountFilter:
    """Keep table rows with exactly `columns` cells."""
    row_selector: str
    columns: int
    labels: Optional[Tuple[str, ...]] = None

    def label_row(self) -> Optional[CounterRow]:
        return list(self.labels) if self.labels else None

    def extract(self, doc: Document) -> CounterTable:
        data: CounterTable = []
        for tr in doc.select_rows(self.row_selector):
            tds = tr.find_all("td")
            if len(tds) == self.columns:
                data.append([_cell_text(td) for td in tds])
        return data


def parse_counter_text(text: Optional[str]) -> str:
    """
    'Total: 1,234' -> '1234'. Also drops the trailing comma of a JSON line.
    Only the text between the first and a second `:` is kept.
    """
    if text is None or ":" not in text:
        raise ExtractionError(f"unexpected counter text: {text!r}")
    return text.split(":")[1].strip().replace(",", "")


@dataclass(frozen=True)
class PathGrid:
    """
    Fixed absolute positions: one row per category, one XPath per metric.
    """
    metrics: Tuple[str, ...]
    categories: Tuple[Tuple[str, Tuple[str, ...]], ...]

    def label_row(self) -> Optional[CounterRow]:
        return ["", *self.metrics]

    def extract(self, doc: Document) -> CounterTable:
        data: CounterTable = []
        for label, xpaths in self.categories:
            if len(xpaths) != len(self.metrics):
                raise ExtractionError(f"{label}: expected {len(self.metrics)} paths, got {len(xpaths)}")
            data.append([label, *(parse_counter_text(doc.xpath_text(xp)) for xp in xpaths)])
        return data

