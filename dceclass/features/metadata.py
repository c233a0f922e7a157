# dceclass/features/metadata.py

from __future__ import annotations

import math

from dataclasses import dataclass
from typing import Dict, Any

from dceclass.features.extractor import ClassificationFeatures


@dataclass
class DocumentMetadata:
    language: str
    page_estimate: int
    structure_score: float
    content_density: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "language": self.language,
            "pageEstimate": self.page_estimate,
            "structureScore": self.structure_score,
            "contentDensity": self.content_density,
        }


FRENCH_FUNCTION_WORDS = frozenset(
    ["le", "la", "les", "de", "des", "du", "et", "est", "pour", "avec", "dans", "sur", "par"]
)
LANGUAGE_SAMPLE_WORDS = 100
FRENCH_MIN_RATIO = 0.1

WORDS_PER_PAGE = 500
BYTES_PER_PAGE = 100_000


def _round_half_up(x: float) -> int:
    # round() in Python is banker's rounding; page counts round .5 upwards.
    return int(math.floor(x + 0.5))


def detect_language(content: str) -> str:
    """'fr' when at least 10% of the first 100 tokens are French function words."""
    words = content.lower().split()[:LANGUAGE_SAMPLE_WORDS]
    if not words:
        return "unknown"
    french = sum(1 for w in words if w in FRENCH_FUNCTION_WORDS)
    return "fr" if french >= len(words) * FRENCH_MIN_RATIO else "unknown"


def estimate_page_count(content: str, file_size: int) -> int:
    """Average of a word-based and a byte-size-based estimate, at least 1."""
    word_count = len(content.split())
    pages_by_words = math.ceil(word_count / WORDS_PER_PAGE)
    pages_by_size = math.ceil(file_size / BYTES_PER_PAGE)
    return max(1, _round_half_up((pages_by_words + pages_by_size) / 2))


def structure_score(features: ClassificationFeatures) -> float:
    score = 0.0
    if features.has_table_of_contents:
        score += 0.2
    if features.has_article_numbers:
        score += 0.3
    if len(features.section_titles) > 5:
        score += 0.3
    if len(features.section_titles) > 10:
        score += 0.2
    return min(1.0, score)


def content_density(content: str) -> float:
    """Average word length scaled to [0, 1]; 0 for text without words."""
    word_count = len(content.split())
    if word_count == 0:
        return 0.0
    return min(1.0, (len(content) / word_count) / 10)


def build_metadata(content: str, file_size: int, features: ClassificationFeatures) -> DocumentMetadata:
    return DocumentMetadata(
        language=detect_language(content),
        page_estimate=estimate_page_count(content, file_size),
        structure_score=round(structure_score(features), 4),
        content_density=round(content_density(content), 4),
    )
