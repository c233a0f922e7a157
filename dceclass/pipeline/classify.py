# dceclass/pipeline/classify.py
"""
Classifier facade for DCE documents.

Runs the whole chain for one document:
1. normalize the text once
2. extract features
3. score every candidate type
4. resolve the best match and calibrate confidence
5. explain the decision and attach document metadata

`classify_many` runs documents independently on a thread pool and returns the
results in input order. A document that fails gets a ClassificationFailure in
its slot instead of aborting the batch.
"""

from __future__ import annotations

import logging

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from dceclass import config
from dceclass.errors import ClassificationError, DceClassifierError, InvalidInputError
from dceclass.extract.normalize import normalize_text
from dceclass.features.extractor import extract_features
from dceclass.features.metadata import DocumentMetadata, build_metadata
from dceclass.rubrics.patterns import DocumentType
from dceclass.rubrics.reasoning import explain
from dceclass.rubrics.resolver import resolve
from dceclass.rubrics.type_scorer import score_types

logger = logging.getLogger(__name__)


CONFIDENCE_THRESHOLDS: Dict[str, float] = {
    "high": 0.8,    # very confident classification
    "medium": 0.6,  # moderately confident
    "low": 0.4,     # manual review recommended
    "reject": 0.3,  # below this the resolver reports OTHER
}


@dataclass
class DocumentInput:
    file_name: str
    content: Any
    file_size: Any = 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DocumentInput":
        """Accept boundary (camelCase) or snake_case keys."""
        return cls(
            file_name=data.get("fileName", data.get("file_name", "")),
            content=data.get("content"),
            file_size=data.get("fileSize", data.get("file_size", 0)),
        )


@dataclass
class ClassificationResult:
    document_type: DocumentType
    confidence: float
    reasoning: str
    detected_sections: List[str]
    metadata: DocumentMetadata
    scores: Dict[DocumentType, float] = field(default_factory=dict, compare=False, repr=False)

    ok = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "documentType": self.document_type.value,
            "confidence": self.confidence,
            "reasoning": self.reasoning,
            "detectedSections": list(self.detected_sections),
            "metadata": self.metadata.to_dict(),
        }


@dataclass
class ClassificationFailure:
    """Error marker occupying a failed document's slot in a batch."""
    file_name: str
    error: str
    message: str

    ok = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fileName": self.file_name,
            "error": {"code": self.error, "message": self.message},
        }


BatchItem = Union[ClassificationResult, ClassificationFailure]


def _validate(content: Any, file_size: Any) -> None:
    if not isinstance(content, str):
        raise InvalidInputError(f"content must be a string, got {type(content).__name__}")
    # bool is an int subclass; a True/False file size is a caller bug
    if isinstance(file_size, bool) or not isinstance(file_size, int):
        raise InvalidInputError(f"file_size must be an integer, got {type(file_size).__name__}")
    if file_size < 0:
        raise InvalidInputError(f"file_size must be >= 0, got {file_size}")


def classify(file_name: str, content: str, file_size: int) -> ClassificationResult:
    """
    Classify one document from its extracted text.

    Args:
        file_name: original file name (logged only; not used for scoring)
        content: plain text already extracted from the document
        file_size: size of the original file in bytes

    Returns:
        ClassificationResult

    Raises:
        InvalidInputError: if content is not a string or file_size not a
            non-negative integer
    """
    _validate(content, file_size)

    doc = normalize_text(content)
    features = extract_features(doc)
    scores = score_types(doc, features)
    match = resolve(scores)

    logger.debug(
        "Classified %s as %s (confidence=%.3f, best=%s %.3f, runner-up %.3f)",
        file_name, match.document_type.value, match.confidence,
        match.best_type.value, match.best_score, match.runner_up_score,
    )

    return ClassificationResult(
        document_type=match.document_type,
        confidence=round(match.confidence, 4),
        reasoning=explain(match.document_type, features, scores),
        detected_sections=list(features.section_titles),
        metadata=build_metadata(content, file_size, features),
        scores=scores,
    )


def _classify_one(doc: Union[DocumentInput, Mapping[str, Any]]) -> BatchItem:
    if not isinstance(doc, DocumentInput):
        if not isinstance(doc, Mapping):
            return ClassificationFailure(
                file_name="",
                error=InvalidInputError.code,
                message=f"document must be a mapping or DocumentInput, got {type(doc).__name__}",
            )
        doc = DocumentInput.from_mapping(doc)

    try:
        return classify(doc.file_name, doc.content, doc.file_size)
    except DceClassifierError as e:
        err = e
    except Exception as e:
        logger.exception("Unexpected error classifying %r", doc.file_name)
        err = ClassificationError(f"Classification failed: {e}")

    logger.warning("Classification of %r failed: %s", doc.file_name, err)
    return ClassificationFailure(file_name=str(doc.file_name), error=err.code, message=str(err))


def classify_many(
    documents: Iterable[Union[DocumentInput, Mapping[str, Any]]],
    *,
    max_workers: Optional[int] = None,
) -> List[BatchItem]:
    """
    Classify documents independently and in parallel.

    Output length equals input length and result i belongs to document i.
    """
    docs = list(documents)
    if not docs:
        return []

    workers = min(max_workers or config.BATCH_MAX_WORKERS, len(docs))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(_classify_one, docs))

    failed = sum(1 for r in results if not r.ok)
    logger.info("Batch classified %d documents (%d failed)", len(results), failed)
    return results


def get_confidence_thresholds() -> Dict[str, float]:
    return dict(CONFIDENCE_THRESHOLDS)


def confidence_band(confidence: float) -> str:
    """Map a confidence to the UI band: high, medium, low or reject."""
    if confidence >= CONFIDENCE_THRESHOLDS["high"]:
        return "high"
    if confidence >= CONFIDENCE_THRESHOLDS["medium"]:
        return "medium"
    if confidence >= CONFIDENCE_THRESHOLDS["low"]:
        return "low"
    return "reject"
