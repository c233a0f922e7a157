# run_classify.py

from __future__ import annotations

import argparse
import json
import logging
import sys

from pathlib import Path
from typing import List

from dceclass import config
from dceclass.pipeline.classify import DocumentInput, classify_many, confidence_band

logger = logging.getLogger("dceclass.cli")


def print_verdict(file_name: str, res) -> None:
    """
    Human-readable verdict from the machine-readable output.
    Keeps it short enough to skim in a terminal.
    """
    print("\n" + "=" * 60)
    print(f"FILE: {file_name}")

    if not res.ok:
        print(f"FAILED: {res.error} - {res.message}")
        print("=" * 60)
        return

    print(f"VERDICT: {res.document_type.value}  (confidence={res.confidence:.3f}, band={confidence_band(res.confidence)})")

    top = sorted(res.scores.items(), key=lambda kv: kv[1], reverse=True)[:3]
    if top:
        print("Top-3: " + ", ".join(f"{t.value}={s:.3f}" for t, s in top))

    print(f"\nWhy this label:\n- {res.reasoning}")

    meta = res.metadata
    print(
        f"\nMetadata: language={meta.language}, pages~{meta.page_estimate}, "
        f"structure={meta.structure_score:.2f}, density={meta.content_density:.2f}"
    )
    if res.detected_sections:
        print("Sections:")
        for title in res.detected_sections[:5]:
            print(f"  - {title}")
        if len(res.detected_sections) > 5:
            print(f"  ... ({len(res.detected_sections) - 5} more)")
    print("=" * 60)


def load_documents(paths: List[str]) -> List[DocumentInput]:
    docs = []
    for p in paths:
        path = Path(p)
        text = path.read_text(encoding="utf-8", errors="replace")
        docs.append(DocumentInput(file_name=path.name, content=text, file_size=path.stat().st_size))
    return docs


def main() -> None:
    ap = argparse.ArgumentParser(description="Classify extracted DCE document text files.")
    ap.add_argument("files", nargs="+", help="UTF-8 text files (already extracted document text)")
    ap.add_argument("--json", action="store_true", help="Print JSON records instead of verdicts")
    ap.add_argument("--workers", type=int, default=None, help="Batch worker threads")
    ap.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        datefmt="%H:%M:%S",
    )

    try:
        docs = load_documents(args.files)
    except FileNotFoundError as exc:
        logger.error("File not found: %s", exc)
        sys.exit(1)

    results = classify_many(docs, max_workers=args.workers)

    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False))
    else:
        for doc, res in zip(docs, results):
            print_verdict(doc.file_name, res)

    if any(not r.ok for r in results):
        sys.exit(2)


if __name__ == "__main__":
    main()
