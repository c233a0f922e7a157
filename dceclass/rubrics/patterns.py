# dceclass/rubrics/patterns.py
"""
DCE document types and their recognition patterns.

Each candidate type has:
- keywords: phrases whose presence is evidence for the type
- section_indicators: phrases typical of the type's section headings
- structure_weight / content_weight: how much structural vs. keyword evidence
  counts toward the type's score (they sum to 1.0)
- feature_weights: contribution of each boolean signal to the type-specific
  feature score

The tables are hand-authored domain configuration. Port changes as data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

from dceclass.extract.normalize import fold


class DocumentType(str, Enum):
    TECHNICAL_SPEC = "technical_spec"
    PARTICULAR_CLAUSES = "particular_clauses"
    UNIT_PRICE_SCHEDULE = "unit_price_schedule"
    CONSULTATION_RULES = "consultation_rules"
    OTHER = "other"


@dataclass(frozen=True)
class DocumentTypePattern:
    """Complete recognition pattern for one document type."""
    type: DocumentType
    code: str
    name: str
    keywords: Tuple[str, ...]
    section_indicators: Tuple[str, ...]
    structure_weight: float
    content_weight: float
    feature_weights: Dict[str, float] = field(default_factory=dict)

    @property
    def folded_keywords(self) -> Tuple[str, ...]:
        return tuple(fold(k) for k in self.keywords)

    @property
    def folded_section_indicators(self) -> Tuple[str, ...]:
        return tuple(fold(s) for s in self.section_indicators)


# Feature weight keys are ClassificationFeatures signal names, plus the two
# term-set predicates "numeric_data" and "consultation_terms".
DOCUMENT_PATTERNS: Dict[DocumentType, DocumentTypePattern] = {
    DocumentType.TECHNICAL_SPEC: DocumentTypePattern(
        type=DocumentType.TECHNICAL_SPEC,
        code="CCTP",
        name="Cahier des Clauses Techniques Particulières",
        keywords=(
            "cahier des clauses techniques particulières",
            "cctp",
            "spécifications techniques",
            "exigences techniques",
            "caractéristiques techniques",
            "performances requises",
            "contraintes techniques",
            "méthodes d'exécution",
            "matériaux et fournitures",
            "modalités d'exécution",
        ),
        section_indicators=(
            "objet du marché",
            "consistance des travaux",
            "contraintes particulières",
            "matériaux",
            "modes opératoires",
            "contrôles et essais",
            "garanties techniques",
        ),
        structure_weight=0.3,
        content_weight=0.7,
        feature_weights={
            "technical_specs": 0.4,
            "performance_requirements": 0.3,
            "article_numbers": 0.2,
            "table_of_contents": 0.1,
        },
    ),
    DocumentType.PARTICULAR_CLAUSES: DocumentTypePattern(
        type=DocumentType.PARTICULAR_CLAUSES,
        code="CCP",
        name="Cahier des Clauses Particulières",
        keywords=(
            "cahier des clauses particulières",
            "ccp",
            "clauses administratives",
            "conditions particulières",
            "dispositions contractuelles",
            "modalités contractuelles",
            "conditions d'exécution",
            "pénalités",
            "délais d'exécution",
            "réception des travaux",
        ),
        section_indicators=(
            "objet du marché",
            "durée du marché",
            "prix et règlement",
            "délais d'exécution",
            "pénalités",
            "garanties",
            "réception",
            "sous-traitance",
        ),
        structure_weight=0.4,
        content_weight=0.6,
        feature_weights={
            "legal_clauses": 0.5,
            "article_numbers": 0.3,
            "table_of_contents": 0.2,
        },
    ),
    DocumentType.UNIT_PRICE_SCHEDULE: DocumentTypePattern(
        type=DocumentType.UNIT_PRICE_SCHEDULE,
        code="BPU",
        name="Bordereau des Prix Unitaires",
        keywords=(
            "bordereau des prix unitaires",
            "bpu",
            "prix unitaires",
            "décomposition des prix",
            "tarifs",
            "barème de prix",
            "coûts unitaires",
            "prix de base",
            "unité de mesure",
            "quantités estimatives",
        ),
        section_indicators=(
            "désignation des prestations",
            "unité",
            "prix unitaire",
            "montant",
            "références",
            "forfait",
            "prix global",
        ),
        structure_weight=0.6,
        content_weight=0.4,
        feature_weights={
            "price_schedule": 0.6,
            "numeric_data": 0.4,
        },
    ),
    DocumentType.CONSULTATION_RULES: DocumentTypePattern(
        type=DocumentType.CONSULTATION_RULES,
        code="RC",
        name="Règlement de Consultation",
        keywords=(
            "règlement de consultation",
            "rc",
            "modalités de candidature",
            "constitution des offres",
            "critères de sélection",
            "procédure de consultation",
            "dossier de candidature",
            "critères d'attribution",
            "calendrier de consultation",
            "remise des offres",
        ),
        section_indicators=(
            "objet de la consultation",
            "candidatures",
            "constitution du dossier",
            "critères de jugement",
            "calendrier",
            "renseignements complémentaires",
            "modalités de remise",
        ),
        structure_weight=0.4,
        content_weight=0.6,
        feature_weights={
            "legal_clauses": 0.3,
            "table_of_contents": 0.2,
            "consultation_terms": 0.5,
        },
    ),
}

TYPE_NAMES: Dict[DocumentType, str] = {
    **{t: p.name for t, p in DOCUMENT_PATTERNS.items()},
    DocumentType.OTHER: "Document non classifié",
}


def candidate_types() -> List[DocumentType]:
    """Candidate types in declaration order; this order breaks score ties."""
    return list(DOCUMENT_PATTERNS.keys())


def get_pattern(doc_type: DocumentType) -> DocumentTypePattern:
    return DOCUMENT_PATTERNS[DocumentType(doc_type)]


def _check_patterns() -> None:
    for t, p in DOCUMENT_PATTERNS.items():
        if not p.keywords or not p.section_indicators:
            raise ValueError(f"Pattern for {t.value} needs keywords and section indicators")
        if abs(p.structure_weight + p.content_weight - 1.0) > 1e-9:
            raise ValueError(f"Weights for {t.value} must sum to 1.0")


_check_patterns()
