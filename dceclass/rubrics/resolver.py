# dceclass/rubrics/resolver.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from dceclass import config
from dceclass.rubrics.patterns import DocumentType


@dataclass
class Match:
    """Resolved classification before explanation and metadata are attached."""
    document_type: DocumentType
    confidence: float
    best_type: DocumentType  # top-scoring candidate, even when demoted to OTHER
    best_score: float
    runner_up_score: float

    @property
    def separation(self) -> float:
        return self.best_score - self.runner_up_score

    @property
    def demoted(self) -> bool:
        return self.document_type is DocumentType.OTHER and self.best_type is not DocumentType.OTHER


def resolve(
    scores: Dict[DocumentType, float],
    *,
    min_confidence: float = config.MIN_CONFIDENCE,
    close_race_floor: float = config.CLOSE_RACE_FLOOR,
) -> Match:
    """
    Pick the best-scoring type and calibrate its confidence.

    - separation > 0.3 from the runner-up: +0.1 (capped at 1.0)
    - separation < 0.1: -0.2 (floored at close_race_floor)
    - anything in between is left as is
    - confidence below min_confidence: OTHER with exactly min_confidence

    Ties keep the order of `scores`, i.e. declaration order of the patterns.
    """
    if not scores:
        return Match(DocumentType.OTHER, min_confidence, DocumentType.OTHER, 0.0, 0.0)

    # sorted() is stable, so equal scores keep declaration order.
    ranked = sorted(scores.items(), key=lambda kv: kv[1], reverse=True)
    best_type, best_score = ranked[0]
    runner_up = ranked[1][1] if len(ranked) > 1 else 0.0

    separation = best_score - runner_up
    confidence = best_score

    if separation > config.CLEAR_SEPARATION:
        confidence = min(1.0, confidence + config.CLEAR_SEPARATION_BONUS)

    if separation < config.CLOSE_SEPARATION:
        confidence = max(close_race_floor, confidence - config.CLOSE_SEPARATION_PENALTY)

    if confidence < min_confidence:
        return Match(DocumentType.OTHER, min_confidence, best_type, best_score, runner_up)

    return Match(best_type, confidence, best_type, best_score, runner_up)
