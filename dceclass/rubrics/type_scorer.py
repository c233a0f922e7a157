# dceclass/rubrics/type_scorer.py
"""
Per-type scoring for DCE documents.

For each candidate type the score combines three measurable parts:
1. keyword ratio, weighted by the type's content weight
2. section indicator ratio, weighted by the type's structure weight
3. a type-specific weighted sum of boolean features, scaled by 0.2

The result is capped at 1.0. Scores are returned in declaration order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Union

from dceclass.extract.normalize import NormalizedText, as_normalized, fold
from dceclass.features.extractor import ClassificationFeatures
from dceclass.rubrics.patterns import DOCUMENT_PATTERNS, DocumentType, DocumentTypePattern

FEATURE_SCALE = 0.2


@dataclass
class TypeScore:
    """Score of one candidate type with the evidence that produced it."""
    document_type: DocumentType
    score: float
    matched_keywords: List[str] = field(default_factory=list)
    matched_sections: List[str] = field(default_factory=list)
    keyword_score: float = 0.0
    structure_score: float = 0.0
    feature_score: float = 0.0

    @property
    def has_evidence(self) -> bool:
        return bool(self.matched_keywords or self.matched_sections or self.feature_score)


def feature_signal(features: ClassificationFeatures, name: str) -> bool:
    if name == "numeric_data":
        return features.has_numeric_data
    if name == "consultation_terms":
        return features.has_consultation_terms
    return features.flag(name)


def type_feature_score(doc_type: DocumentType, features: ClassificationFeatures) -> float:
    """
    Weighted sum of the boolean signals configured for `doc_type`.
    Types without a pattern (e.g. OTHER) score 0.
    """
    pattern = DOCUMENT_PATTERNS.get(doc_type)
    if pattern is None:
        return 0.0
    return sum(w for name, w in pattern.feature_weights.items() if feature_signal(features, name))


def matched_keywords(doc: NormalizedText, pattern: DocumentTypePattern) -> List[str]:
    return [k for k in pattern.folded_keywords if k in doc.text]


def matched_sections(
    doc: NormalizedText,
    pattern: DocumentTypePattern,
    section_titles: List[str],
) -> List[str]:
    """An indicator matches if it occurs in the text or inside a detected title."""
    titles = [fold(t) for t in section_titles]
    return [
        s for s in pattern.folded_section_indicators
        if s in doc.text or any(s in t for t in titles)
    ]


def score_type(
    doc: NormalizedText,
    features: ClassificationFeatures,
    pattern: DocumentTypePattern,
) -> TypeScore:
    """Score one candidate type and keep the parts for explanation."""
    kw = matched_keywords(doc, pattern)
    secs = matched_sections(doc, pattern, features.section_titles)

    keyword_score = len(kw) / len(pattern.keywords) * pattern.content_weight
    structure_score = len(secs) / len(pattern.section_indicators) * pattern.structure_weight
    feature_score = type_feature_score(pattern.type, features) * FEATURE_SCALE

    score = min(1.0, keyword_score + structure_score + feature_score)

    return TypeScore(
        document_type=pattern.type,
        score=score,
        matched_keywords=kw,
        matched_sections=secs,
        keyword_score=round(keyword_score, 4),
        structure_score=round(structure_score, 4),
        feature_score=round(feature_score, 4),
    )


def score_types_detailed(
    content: Union[str, NormalizedText],
    features: ClassificationFeatures,
) -> Dict[DocumentType, TypeScore]:
    doc = as_normalized(content)
    return {t: score_type(doc, features, p) for t, p in DOCUMENT_PATTERNS.items()}


def score_types(
    content: Union[str, NormalizedText],
    features: ClassificationFeatures,
) -> Dict[DocumentType, float]:
    """
    Score every candidate type.

    Args:
        content: raw text or the NormalizedText shared with the extractor
        features: output of extract_features for the same text

    Returns:
        mapping type -> score in [0, 1], in declaration order
    """
    return {t: s.score for t, s in score_types_detailed(content, features).items()}
