# dceclass/extract/normalize.py

from __future__ import annotations

import unicodedata

from dataclasses import dataclass, field
from typing import List


_APOSTROPHES = {
    "’": "'",  # right single quotation mark
    "ʼ": "'",  # modifier letter apostrophe
    "‘": "'",
}


def strip_accents(text: str) -> str:
    """
    Canonical decomposition (NFD) followed by removal of combining marks.
    'é' -> 'e', 'Écrit' -> 'Ecrit'. Case is preserved.
    """
    decomposed = unicodedata.normalize("NFD", text)
    out = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    for src, dst in _APOSTROPHES.items():
        out = out.replace(src, dst)
    return out


def fold(text: str) -> str:
    """
    The one normalization used everywhere text is compared against a pattern.
    Pattern literals go through the same function as document text.
    """
    return strip_accents((text or "").lower())


@dataclass(frozen=True)
class NormalizedText:
    """
    Standard container for a document's text once normalized.
    Built once per classification and shared by the feature extractor and the
    type scorer, so neither recomputes it.
    """
    raw: str
    text: str  # folded: lowercase, accents removed
    lines: List[str] = field(default_factory=list)  # raw lines, stripped, non-empty

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


def normalize_text(content: str) -> NormalizedText:
    """
    Normalize extracted document text.

    Args:
        content: plain text as produced by the upstream extractor

    Returns:
        NormalizedText
    """
    lines: List[str] = []
    for ln in content.splitlines():
        ln = ln.strip()
        if ln:
            lines.append(ln)

    return NormalizedText(raw=content, text=fold(content), lines=lines)


def as_normalized(content) -> NormalizedText:
    """Accept either raw text or an already normalized value."""
    if isinstance(content, NormalizedText):
        return content
    return normalize_text(content)
