from __future__ import annotations

from dataclasses import dataclass
from typing import List
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag


@dataclass(slots=True)
class Document:
    """A fetched page: its final URL plus the parsed element tree."""

    url: str
    soup: BeautifulSoup

    @classmethod
    def from_html(cls, html: str, url: str) -> "Document":
        return cls(url=url, soup=BeautifulSoup(html, "html.parser"))

    @property
    def base_url(self) -> str:
        base = self.soup.find("base", href=True)
        if base is not None:
            return urljoin(self.url, str(base["href"]).strip())
        return self.url

    def resolve(self, href: str) -> str:
        return urljoin(self.base_url, href.strip())

    def table_rows(self) -> List[Tag]:
        return table_body_rows(self.soup)


def table_body_rows(scope: Tag) -> List[Tag]:
    # Browsers put bare <tr> into an implicit <tbody>; html.parser does not,
    # so "table tbody tr" is emulated by skipping header/footer rows.
    rows: List[Tag] = []
    for row in scope.select("table tr"):
        if row.find_parent(["thead", "tfoot"]) is not None:
            continue
        rows.append(row)
    return rows
