from __future__ import annotations

import re


# "1. ", "12) ", "A. ", "B) " and the "C.) " variant used on the listing page.
_ENUMERATION_PREFIX_RE = re.compile(r"^\s*(?:\d+|[A-Z])(?:\.\)?|\))\s*")
# Trailing ":", "-", "—", "|" in any mixture, e.g. ":-", " - ", " —|".
_TRAILING_SEPARATORS_RE = re.compile(r"(?:\s*[:\-—|])+\s*$")
_LINE_BREAKS_RE = re.compile(r"[\n\t\r]")


def squash_whitespace(text: str | None) -> str:
    if not text:
        return ""
    return _LINE_BREAKS_RE.sub("", text.strip())


def clean_text(text: str | None) -> str:
    if not text:
        return ""
    text = _ENUMERATION_PREFIX_RE.sub("", text, count=1)
    text = _TRAILING_SEPARATORS_RE.sub("", text, count=1)
    return text.strip()
