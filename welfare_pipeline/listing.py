from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, Iterable, List

from .document import Document
from .models import Scheme, Section
from .text_cleaning import squash_whitespace


LOGGER = logging.getLogger(__name__)


def new_scheme_id() -> str:
    return str(uuid.uuid4())


@dataclass(slots=True)
class _SectionDraft:
    title: str
    # url -> link texts in encounter order; insertion order doubles as scheme order.
    names_by_url: Dict[str, List[str]] = field(default_factory=dict)

    def add_link(self, name: str, url: str) -> None:
        if url in self.names_by_url:
            self.names_by_url[url].append(name)
        else:
            self.names_by_url[url] = [name]

    def build(self) -> Section:
        schemes = tuple(
            Scheme(name=", ".join(names), url=url) for url, names in self.names_by_url.items()
        )
        return Section(title=self.title, schemes=schemes)


def parse_listing(document: Document) -> List[Section]:
    drafts: list[_SectionDraft] = []
    skipped_rows = 0

    for row in document.table_rows():
        heading = row.find("b")
        if heading is not None:
            drafts.append(_SectionDraft(title=squash_whitespace(heading.get_text())))
            continue

        if not drafts:
            skipped_rows += 1
            continue

        current = drafts[-1]
        for anchor in row.find_all("a", href=True):
            name = squash_whitespace(anchor.get_text())
            url = document.resolve(str(anchor["href"]))
            current.add_link(name, url)

    sections = [draft.build() for draft in drafts]
    LOGGER.info(
        "Listing parsed: sections=%s, schemes=%s, rows_before_first_heading=%s",
        len(sections),
        sum(len(section.schemes) for section in sections),
        skipped_rows,
    )
    return sections


def filter_sections(sections: Iterable[Section]) -> List[Section]:
    kept: list[Section] = []
    for section in sections:
        if section.schemes:
            kept.append(section)
        else:
            LOGGER.debug("Dropping empty section %r", section.title)
    return kept


def assign_ids(
    sections: Iterable[Section],
    id_factory: Callable[[], str] = new_scheme_id,
) -> List[Section]:
    stamped: list[Section] = []
    for section in sections:
        schemes = []
        for scheme in section.schemes:
            scheme_id = str(id_factory() or "")
            if not scheme_id:
                raise ValueError(f"Identifier generator returned an empty id for {scheme.url}")
            schemes.append(replace(scheme, id=scheme_id))
        stamped.append(replace(section, schemes=tuple(schemes)))
    return stamped
