# dceclass/features/signals.py

from __future__ import annotations

import re

from dataclasses import dataclass
from typing import Dict, List, Tuple

from dceclass.extract.normalize import fold


@dataclass(frozen=True)
class CueList:
    """
    A list of cue substrings plus how many distinct cues must be present
    before the signal is considered detected.
    """
    name: str
    cues: Tuple[str, ...]
    min_present: int


def _cue_list(name: str, cues: List[str], min_present: int) -> CueList:
    # Cues are folded up front so they compare against folded document text.
    return CueList(name=name, cues=tuple(fold(c) for c in cues), min_present=min_present)


# Hand-tuned French cue lists. Keep them verbatim; they encode domain knowledge.
CUE_LISTS: Dict[str, CueList] = {
    "table_of_contents": _cue_list(
        "table_of_contents",
        ["table des matières", "sommaire", "index", "table des matires"],
        min_present=1,
    ),
    "price_schedule": _cue_list(
        "price_schedule",
        ["prix unitaire", "cout unitaire", "tarif", "montant", "€", "euro", "ht", "ttc"],
        min_present=3,
    ),
    "legal_clauses": _cue_list(
        "legal_clauses",
        ["article", "clause", "alinéa", "paragraphe", "dispositions",
         "conditions", "obligations", "responsabilité"],
        min_present=4,
    ),
    "technical_specs": _cue_list(
        "technical_specs",
        ["spécification", "caractéristique", "performance", "norme",
         "standard", "technique", "matériau", "équipement"],
        min_present=3,
    ),
    "performance_requirements": _cue_list(
        "performance_requirements",
        ["performance", "rendement", "efficacité", "capacité",
         "débit", "vitesse", "puissance", "résistance"],
        min_present=2,
    ),
}

_ARTICLE_RE = re.compile(r"article\s+\d+|art\.\s*\d+|\d+\.\d+", re.I)
ARTICLE_MIN_MATCHES = 3


def cues_present(text: str, cue_list: CueList) -> List[str]:
    """
    Return the cues of `cue_list` found in `text` (already folded).
    Plain substring test, one hit per cue regardless of repetitions.
    """
    return [c for c in cue_list.cues if c in text]


def detect(text: str, name: str) -> bool:
    cue_list = CUE_LISTS[name]
    return len(cues_present(text, cue_list)) >= cue_list.min_present


def count_article_numbers(text: str) -> int:
    return len(_ARTICLE_RE.findall(text))


def has_table_of_contents(text: str) -> bool:
    return detect(text, "table_of_contents")


def has_price_schedule(text: str) -> bool:
    return detect(text, "price_schedule")


def has_legal_clauses(text: str) -> bool:
    return detect(text, "legal_clauses")


def has_technical_specs(text: str) -> bool:
    return detect(text, "technical_specs")


def has_article_numbers(text: str) -> bool:
    return count_article_numbers(text) >= ARTICLE_MIN_MATCHES


def has_performance_requirements(text: str) -> bool:
    return detect(text, "performance_requirements")
