# dceclass/features/extractor.py
"""
Feature extraction for DCE document classification.

Turns normalized text into the fixed set of structural signals the type
scorer works from: six boolean detectors, candidate section titles, and a
top-50 term-frequency table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Union

from dceclass.extract.normalize import NormalizedText, as_normalized
from dceclass.features import signals
from dceclass.features.sections import extract_section_titles
from dceclass.features.terms import has_consultation_terms, has_numeric_data, term_frequency


@dataclass
class ClassificationFeatures:
    """Signals derived from one document. Computed per call, never shared."""
    has_table_of_contents: bool = False
    has_price_schedule: bool = False
    has_legal_clauses: bool = False
    has_technical_specs: bool = False
    has_article_numbers: bool = False
    has_performance_requirements: bool = False
    section_titles: List[str] = field(default_factory=list)
    key_term_frequency: Dict[str, int] = field(default_factory=dict)

    @property
    def has_numeric_data(self) -> bool:
        return has_numeric_data(self.key_term_frequency.keys())

    @property
    def has_consultation_terms(self) -> bool:
        return has_consultation_terms(self.key_term_frequency.keys())

    def flag(self, name: str) -> bool:
        """Look up a signal by its short name, e.g. 'legal_clauses'."""
        return bool(getattr(self, f"has_{name}"))

    def fired(self) -> List[str]:
        """Short names of the boolean detectors that fired, in a fixed order."""
        return [name for name in SIGNAL_NAMES if self.flag(name)]

    def to_dict(self) -> Dict[str, object]:
        return {
            "hasTableOfContents": self.has_table_of_contents,
            "hasPriceSchedule": self.has_price_schedule,
            "hasLegalClauses": self.has_legal_clauses,
            "hasTechnicalSpecs": self.has_technical_specs,
            "hasArticleNumbers": self.has_article_numbers,
            "hasPerformanceRequirements": self.has_performance_requirements,
            "sectionTitles": list(self.section_titles),
            "keyTermFrequency": dict(self.key_term_frequency),
        }


SIGNAL_NAMES = (
    "table_of_contents",
    "price_schedule",
    "legal_clauses",
    "technical_specs",
    "article_numbers",
    "performance_requirements",
)


def extract_features(content: Union[str, NormalizedText]) -> ClassificationFeatures:
    """
    Extract classification features from document text.

    Args:
        content: raw extracted text, or the NormalizedText built for it

    Returns:
        ClassificationFeatures
    """
    doc = as_normalized(content)
    t = doc.text

    return ClassificationFeatures(
        has_table_of_contents=signals.has_table_of_contents(t),
        has_price_schedule=signals.has_price_schedule(t),
        has_legal_clauses=signals.has_legal_clauses(t),
        has_technical_specs=signals.has_technical_specs(t),
        has_article_numbers=signals.has_article_numbers(t),
        has_performance_requirements=signals.has_performance_requirements(t),
        section_titles=extract_section_titles(doc.lines),
        key_term_frequency=term_frequency(t),
    )
