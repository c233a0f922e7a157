# app.py
"""
DCE Classifier API - FastAPI application for French public-tender document classification.

Classifies already-extracted text of DCE documents (CCTP, CCP, BPU, RC) with
weighted keyword, section and feature scoring plus confidence calibration.

Run with: uvicorn app:app --reload --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional
from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from dceclass import config
from dceclass.pipeline.classify import (
    DocumentInput,
    classify,
    classify_many,
    confidence_band,
    get_confidence_thresholds,
)
from dceclass.rubrics.patterns import DOCUMENT_PATTERNS, TYPE_NAMES, DocumentType

logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger("dceclass.api")

API_VERSION = "1.0.0"


# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class DocumentRequest(BaseModel):
    """A single document to classify: extracted text plus file metadata."""
    fileName: str = Field(..., min_length=1)
    content: str
    fileSize: int = Field(..., ge=0, le=config.MAX_FILE_SIZE_BYTES)


class BatchRequest(BaseModel):
    documents: List[DocumentRequest] = Field(
        ...,
        min_length=1,
        max_length=config.BATCH_MAX_DOCUMENTS,
    )


class DocumentMetadataModel(BaseModel):
    language: str
    pageEstimate: int
    structureScore: float
    contentDensity: float


class ClassificationResponse(BaseModel):
    """Classification of one document."""
    fileName: str
    documentType: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    confidenceBand: str
    reasoning: str
    detectedSections: List[str]
    metadata: DocumentMetadataModel
    scores: Optional[Dict[str, float]] = None


class BatchItemResponse(BaseModel):
    """Either a classification or an error marker, never both."""
    fileName: str
    ok: bool
    result: Optional[ClassificationResponse] = None
    error: Optional[Dict[str, str]] = None


class BatchResponse(BaseModel):
    results: List[BatchItemResponse]
    total: int
    failed: int


# =============================================================================
# FASTAPI APP
# =============================================================================

app = FastAPI(
    title="DCE Classifier API",
    description="""
    Classification of French public-tender (DCE) documents from extracted text.

    ## Document types

    * **CCTP** - Cahier des Clauses Techniques Particulières
    * **CCP** - Cahier des Clauses Particulières
    * **BPU** - Bordereau des Prix Unitaires
    * **RC** - Règlement de Consultation
    * **OTHER** - Document non classifié

    ## Confidence bands

    high >= 0.8, medium >= 0.6, low >= 0.4; results below 0.3 are reported as OTHER.
    """,
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def to_response(file_name: str, result, include_scores: bool = False) -> ClassificationResponse:
    """Convert a ClassificationResult to the API response model."""
    data = result.to_dict()
    return ClassificationResponse(
        fileName=file_name,
        documentType=data["documentType"],
        confidence=data["confidence"],
        confidenceBand=confidence_band(result.confidence),
        reasoning=data["reasoning"],
        detectedSections=data["detectedSections"],
        metadata=DocumentMetadataModel(**data["metadata"]),
        scores={t.value: round(s, 4) for t, s in result.scores.items()} if include_scores else None,
    )


# =============================================================================
# API ENDPOINTS
# =============================================================================

@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "DCE Classifier API",
        "version": API_VERSION,
        "document_types": [t.value for t in DocumentType],
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": API_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "limits": {
            "batch_max_documents": config.BATCH_MAX_DOCUMENTS,
            "batch_max_workers": config.BATCH_MAX_WORKERS,
            "max_file_size_bytes": config.MAX_FILE_SIZE_BYTES,
        },
    }


@app.get("/document-types")
async def list_document_types():
    """List the recognition patterns of every candidate type."""
    types = {}
    for doc_type, pattern in DOCUMENT_PATTERNS.items():
        types[doc_type.value] = {
            "code": pattern.code,
            "name": pattern.name,
            "keywords": list(pattern.keywords),
            "section_indicators": list(pattern.section_indicators),
            "structure_weight": pattern.structure_weight,
            "content_weight": pattern.content_weight,
            "feature_weights": dict(pattern.feature_weights),
        }
    types[DocumentType.OTHER.value] = {"code": "OTHER", "name": TYPE_NAMES[DocumentType.OTHER]}

    return {"document_types": types, "total": len(types)}


@app.get("/thresholds")
async def thresholds():
    """Confidence bands for flagging results for manual review."""
    return get_confidence_thresholds()


@app.post("/classify", response_model=ClassificationResponse, response_model_exclude_none=True)
async def classify_endpoint(
    body: DocumentRequest,
    debug: bool = Query(False, description="Include raw per-type scores"),
):
    """Classify a single document."""
    try:
        result = classify(body.fileName, body.content, body.fileSize)
    except Exception as e:
        logger.exception("Classification failed for %s", body.fileName)
        raise HTTPException(status_code=500, detail=f"Classification failed: {str(e)}")

    return to_response(body.fileName, result, include_scores=debug)


@app.post("/classify/batch", response_model=BatchResponse, response_model_exclude_none=True)
async def classify_batch_endpoint(body: BatchRequest):
    """Classify up to BATCH_MAX_DOCUMENTS documents; order is preserved."""
    docs = [DocumentInput(d.fileName, d.content, d.fileSize) for d in body.documents]
    results = classify_many(docs)

    items: List[BatchItemResponse] = []
    for doc, res in zip(docs, results):
        if res.ok:
            items.append(BatchItemResponse(fileName=doc.file_name, ok=True, result=to_response(doc.file_name, res)))
        else:
            items.append(BatchItemResponse(
                fileName=doc.file_name,
                ok=False,
                error={"code": res.error, "message": res.message},
            ))

    return BatchResponse(
        results=items,
        total=len(items),
        failed=sum(1 for i in items if not i.ok),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
