"""
Insight normalization: every insight becomes exactly one non-empty string.

Resolution order
----------------
    TextInsight        -> the text itself
    StructuredInsight  -> first non-empty string under "description",
                          "insight", "text", "content" (mappings only),
                          else compact JSON of the whole value
    OpaqueInsight      -> UNDISPLAYABLE_INSIGHT

Anything that still yields no text (an empty string, a value JSON cannot
encode) degrades to ``UNDISPLAYABLE_INSIGHT`` rather than raising.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from interview_insights.models.analysis import StructuredInsight, TextInsight, parse_insight

UNDISPLAYABLE_INSIGHT = "Unable to display insight"

INSIGHT_TEXT_KEYS: tuple[str, ...] = ("description", "insight", "text", "content")


def normalize_insight(insight: Any) -> str:
    """Return the display string for one insight (raw or already resolved)."""
    resolved = parse_insight(insight)

    if isinstance(resolved, TextInsight):
        return resolved.text or UNDISPLAYABLE_INSIGHT

    if isinstance(resolved, StructuredInsight):
        value = resolved.value
        if isinstance(value, Mapping):
            for key in INSIGHT_TEXT_KEYS:
                candidate = value.get(key)
                if isinstance(candidate, str) and candidate:
                    return candidate
        return _serialize(value) or UNDISPLAYABLE_INSIGHT

    return UNDISPLAYABLE_INSIGHT


def _serialize(value: Any) -> str:
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError):
        return ""
