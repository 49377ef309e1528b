from __future__ import annotations

import logging
from typing import Dict, List, Optional

from bs4.element import Tag

from .document import Document, table_body_rows
from .models import DetailResult
from .text_cleaning import squash_whitespace


LOGGER = logging.getLogger(__name__)

DETAIL_KEYS = ("Description of the Scheme", "Procedure", "Eligibility")

BOLD_STYLE = "font-weight: 700"
KEY_SELECTOR = f'td b, td span[style*="{BOLD_STYLE}"]'
VALUE_SELECTOR = f'td span:not([style*="{BOLD_STYLE}"])'


def extract_detail(document: Document) -> DetailResult:
    details = extract_details(document)
    criteria = extract_criteria(document)
    LOGGER.debug(
        "Extracted %s detail fields and %s criteria from %s",
        len(details),
        len(criteria),
        document.url,
    )
    return DetailResult(details=details, criteria=criteria)


def extract_details(document: Document) -> Dict[str, str]:
    details: Dict[str, str] = {}

    for row in document.table_rows():
        key_element = row.select_one(KEY_SELECTOR)
        if key_element is None:
            continue

        key = squash_whitespace(key_element.get_text())
        if key not in DETAIL_KEYS:
            continue

        value = _detail_value(row)
        if value is None:
            continue
        details[key] = value

    return details


def _detail_value(row: Tag) -> Optional[str]:
    value_element = row.select_one(VALUE_SELECTOR)
    if value_element is not None:
        return squash_whitespace(value_element.get_text())

    second_cell = row.select_one("td:nth-child(2)")
    if second_cell is None:
        return None
    return squash_whitespace(second_cell.get_text())


def extract_criteria(document: Document) -> Dict[str, str]:
    container = find_criteria_container(document)
    if container is None:
        return {}

    rows = table_body_rows(container)
    if len(rows) < 2:
        return {}

    keys = rows[0].find_all("td")
    values = rows[1].find_all("td")
    criteria: Dict[str, str] = {}
    for index, key_cell in enumerate(keys):
        key = squash_whitespace(key_cell.get_text())
        value = squash_whitespace(values[index].get_text()) if index < len(values) else ""
        criteria[key] = value
    return criteria


def find_criteria_container(document: Document) -> Optional[Tag]:
    # The criteria table sits in the centered block that follows the first
    # centered block immediately followed by a paragraph.
    containers: List[Tag] = document.soup.select('div[align="center"]')
    for index, container in enumerate(containers):
        sibling = container.find_next_sibling()
        if sibling is not None and sibling.name == "p":
            if index + 1 < len(containers):
                return containers[index + 1]
            return None
    return None
