# dceclass/rubrics/reasoning.py

from __future__ import annotations

from typing import Dict, List, Tuple

from dceclass.features.extractor import ClassificationFeatures
from dceclass.rubrics.patterns import TYPE_NAMES, DocumentType


# (signal, sentence) pairs stated when the signal fired for the resolved type.
FEATURE_CALLOUTS: Dict[DocumentType, List[Tuple[str, str]]] = {
    DocumentType.TECHNICAL_SPEC: [
        ("technical_specs", "Présence de spécifications techniques détaillées"),
        ("performance_requirements", "Exigences de performance identifiées"),
    ],
    DocumentType.PARTICULAR_CLAUSES: [
        ("legal_clauses", "Clauses contractuelles et administratives présentes"),
    ],
    DocumentType.UNIT_PRICE_SCHEDULE: [
        ("price_schedule", "Structure de prix unitaires détectée"),
    ],
    DocumentType.CONSULTATION_RULES: [
        ("legal_clauses", "Procédures de consultation identifiées"),
    ],
}


def _pct(score: float) -> str:
    return f"{score * 100:.1f}%"


def explain(
    doc_type: DocumentType,
    features: ClassificationFeatures,
    scores: Dict[DocumentType, float],
) -> str:
    """
    Human-readable justification: the resolved type with its score, the
    type-specific signals that fired, and how many section titles were found.
    """
    reasons: List[str] = []

    if doc_type is DocumentType.OTHER:
        best = max(scores.values()) if scores else 0.0
        reasons.append(
            f"{TYPE_NAMES[DocumentType.OTHER]} : aucun type ne dépasse le seuil de confiance "
            f"(meilleur score {_pct(best)})"
        )
    else:
        reasons.append(
            f"Document identifié comme {TYPE_NAMES[doc_type]} avec un score de "
            f"{_pct(scores.get(doc_type, 0.0))}"
        )
        for signal, sentence in FEATURE_CALLOUTS.get(doc_type, []):
            if features.flag(signal):
                reasons.append(sentence)

    if features.section_titles:
        reasons.append(f"{len(features.section_titles)} sections structurées détectées")

    return ". ".join(reasons)
