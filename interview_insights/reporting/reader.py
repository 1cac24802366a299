"""
Payload reader: discovers and loads analysis payload files.

Loaders return ``None`` rather than raising when a file is missing, is not
UTF-8, or is not valid JSON, so CLI commands can print a friendly message
without try/except at the call site.  Schema validation is a separate step
(``parse_payload``) and does raise: a structurally wrong payload is an
upstream defect the user needs to see in full.

File-discovery convention:
  ``find_latest_payload()`` picks the most-recently-modified ``*.json`` in a
  directory, so an older analysis is never silently preferred over a newer one.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from interview_insights.models.payload import AnalysisPayload

logger = logging.getLogger(__name__)


def find_latest_payload(directory: Path, glob_pattern: str = "*.json") -> Path | None:
    """Pick the payload the CLI should open when none is named.

    Candidates are files under ``directory`` matching ``glob_pattern``; the
    one written last (by mtime, not by name) wins, so a re-run analysis
    replaces an older one even when the file names do not sort by date.
    A missing directory or no match gives ``None``.
    """
    if not directory.is_dir():
        return None
    candidates = [p for p in directory.glob(glob_pattern) if p.is_file()]
    if not candidates:
        return None
    return max(candidates, key=lambda p: p.stat().st_mtime)


def load_payload_json(path: Path) -> dict[str, Any] | None:
    """Read one payload file into a raw dict, without schema validation.

    Returns ``None`` (and logs why) when the file is missing, unreadable,
    not UTF-8, not JSON, or holds something other than a JSON object.
    """
    if not path.exists():
        logger.debug("Payload file not found: %s", path)
        return None
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (ValueError, OSError) as exc:
        # ValueError covers both JSONDecodeError and UnicodeDecodeError.
        logger.warning("Failed to load payload %s: %s", path, exc)
        return None
    if not isinstance(raw, dict):
        logger.warning(
            "Payload %s must contain a JSON object, got %s", path, type(raw).__name__
        )
        return None
    return raw


def parse_payload(raw: dict[str, Any]) -> AnalysisPayload:
    """Validate a raw payload dict.

    Raises:
        pydantic.ValidationError: If a required field is missing or mistyped.
    """
    payload = AnalysisPayload.model_validate(raw)
    logger.debug(
        "Payload validated: %d QA items, %d recommendations, %d gaps",
        len(payload.qa_analysis),
        len(payload.recommendations),
        len(payload.performance_gaps),
    )
    return payload
