"""
Turn raw report bytes into text the table reader can use.

Responsibilities:
- encoding detection + decoding
- newline normalization to LF
- reporting what was changed
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from charset_normalizer import from_bytes

logger = logging.getLogger(__name__)


def _is_utf8(name: str) -> bool:
    return name.lower().replace("-", "_") in ("utf_8", "utf8")


def decode_report_bytes(raw: bytes) -> tuple[str, Dict[str, Any]]:
    """
    Decode report bytes to text with LF newlines.

    Rules:
    - Detect encoding best-effort via charset-normalizer, utf-8 if nothing is detected.
    - If decoding with the detected encoding fails, try utf-8.
    - If that fails too, decode with replacement characters so the caller still gets text.
    - CRLF and lone CR become LF, so the reader only has to know about '\\n'.
    """
    detected = None

    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    # Exported sheets often start with a UTF-8 BOM; drop it here rather than in the reader.
    if raw.startswith(b"\xef\xbb\xbf") and _is_utf8(decode_used):
        decode_used = "utf-8-sig"

    decode_fallback = False

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        try:
            text = raw.decode("utf-8")
            decode_used = "utf-8"
        except UnicodeDecodeError:
            text = raw.decode("utf-8", errors="replace")
            decode_used = "utf-8"
        decode_fallback = True
        logger.warning("could not decode report as %s, fell back to %s", detected, decode_used)

    # --- Newline normalization: CRLF/CR -> LF ---
    nl_before = {
        "crlf": text.count("\r\n"),
        "cr": text.count("\r") - text.count("\r\n"),
        "lf": text.count("\n") - text.count("\r\n"),
    }

    text = text.replace("\r\n", "\n").replace("\r", "\n")

    report = {
        "detected": detected,
        "decode_used": decode_used,
        "decode_fallback": decode_fallback,
        "newlines": {
            "policy": "lf",
            "before": nl_before,
            "changed": (nl_before["crlf"] > 0) or (nl_before["cr"] > 0),
        },
    }

    return text, report
