"""
Reading report files and writing property documents.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .models import PropertyDocument
from .normalize import decode_report_bytes

logger = logging.getLogger(__name__)


class ReportError(Exception):
    """Base error for report I/O."""


class ReportNotFoundError(ReportError):
    pass


def read_report(path: Path) -> tuple[str, Dict[str, Any]]:
    """Read a report file and return (text, decoding report)."""
    path = Path(path)
    if not path.is_file():
        raise ReportNotFoundError(f"report not found: {path}")

    text, decoding = decode_report_bytes(path.read_bytes())
    logger.debug("read %s (%s)", path, decoding["decode_used"])
    return text, decoding


def document_json(doc: PropertyDocument) -> str:
    return json.dumps(doc.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False)


def write_document(doc: PropertyDocument, output_dir: Path) -> Path:
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    out = output_dir / f"{doc.id}.json"
    out.write_text(document_json(doc), encoding="utf-8")
    logger.info("wrote %s", out)
    return out
