# dceclass/features/terms.py

from __future__ import annotations

import re

from collections import Counter
from typing import Dict, Iterable

from dceclass.extract.normalize import fold


_SPLIT_RE = re.compile(r"\W+")

MIN_TERM_LEN = 4
TOP_TERMS = 50

# Term-set cues used by the unit price schedule and consultation rules scores.
NUMERIC_HINTS = ("euro", "prix", "cout", "montant", "tarif")
NUMERIC_MIN_TERMS = 5

CONSULTATION_TERMS = tuple(
    fold(t) for t in ["candidature", "offre", "consultation", "critère", "sélection", "attribution"]
)
CONSULTATION_MIN_TERMS = 3


def term_frequency(text: str, *, top: int = TOP_TERMS) -> Dict[str, int]:
    """
    Count words longer than three characters and keep the `top` most frequent.

    Ties keep first-seen order: Counter preserves insertion order and
    sorted() is stable, so two terms with equal counts stay in the order they
    first appeared in the document.
    """
    words = [w for w in _SPLIT_RE.split(text) if len(w) >= MIN_TERM_LEN]
    counts = Counter(words)
    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return dict(ranked[:top])


def has_numeric_data(terms: Iterable[str]) -> bool:
    numeric = [
        t for t in terms
        if any(ch.isdigit() for ch in t) or any(h in t for h in NUMERIC_HINTS)
    ]
    return len(numeric) >= NUMERIC_MIN_TERMS


def has_consultation_terms(terms: Iterable[str]) -> bool:
    keys = list(terms)
    found = [c for c in CONSULTATION_TERMS if any(c in k for k in keys)]
    return len(found) >= CONSULTATION_MIN_TERMS
