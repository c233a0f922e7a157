# dceclass/features/sections.py

from __future__ import annotations

import re

from typing import List

from dceclass.extract.normalize import strip_accents


# A heading-like line: optional numbering/whitespace, then an uppercase letter,
# and no sentence-ending punctuation anywhere after it.
_TITLE_RE = re.compile(r"^[\d\s]*[A-Z][^.!?]*$")

MIN_TITLE_LEN = 10  # exclusive
MAX_TITLE_LEN = 100  # exclusive
MAX_TITLES = 20


def is_section_title(line: str) -> bool:
    """
    Accents are stripped before matching so 'État des lieux' starts with an
    uppercase letter just like 'Etat des lieux'.
    """
    if not (MIN_TITLE_LEN < len(line) < MAX_TITLE_LEN):
        return False
    return bool(_TITLE_RE.match(strip_accents(line)))


def extract_section_titles(
    lines: List[str],
    *,
    max_titles: int = MAX_TITLES,
) -> List[str]:
    """
    Collect candidate section headings in source order.

    Args:
        lines: stripped, non-empty lines of the original (case-preserved) text
        max_titles: keep only the first N matches

    Returns:
        list of heading strings, as they appear in the document
    """
    titles: List[str] = []
    for ln in lines:
        if is_section_title(ln):
            titles.append(ln)
            if len(titles) >= max_titles:
                break
    return titles
