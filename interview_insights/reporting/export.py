"""
Writers behind the ``export`` CLI command.

``export_to_json`` dumps a presentation tree (``DashboardView.to_dict()`` or
one section of it) as-is.  ``export_to_csv`` writes flat rows for opening a
session's results in a spreadsheet; the ``flatten_*`` adapters produce those
rows from the nested views:

  - ``flatten_qa_analysis_for_export()``: one row per candidate answer.
  - ``flatten_training_for_export()``: one row per recommendation.

Both writers create missing parent directories and return the path written.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Union

from interview_insights.assembly.views import EmptyState, QAAnalysisView, TrainingView

QA_EXPORT_FIELDS: list[str] = [
    "item_key", "question", "question_timestamp", "relevance",
    "relevance_tier", "relevance_explanation", "answer_key",
    "answer_timestamp", "answer_text", "jd_match", "answer_tier",
    "answer_explanation",
]

TRAINING_EXPORT_FIELDS: list[str] = [
    "recommendation_key", "area", "priority", "priority_variant", "issue",
    "recommendation", "expected_improvement", "resources",
    "missed_follow_up_count", "suggested_questions",
]


def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write flattened QA or training rows to ``path`` as UTF-8 CSV.

    Args:
        records:    Rows from a ``flatten_*`` adapter.
        path:       Output file.
        fieldnames: Column order, normally ``QA_EXPORT_FIELDS`` or
                    ``TRAINING_EXPORT_FIELDS``.  With no rows the header is
                    still written, so an empty section exports as a header
                    line.  Without it, columns follow the first row, and an
                    empty export is an empty file.

    Returns:
        ``path``.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    columns = fieldnames or (list(records[0]) if records else [])
    with path.open("w", newline="", encoding="utf-8") as fh:
        if not columns:
            return path
        writer = csv.DictWriter(fh, fieldnames=columns, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    return path


def export_to_json(data: dict | list, path: Path) -> Path:
    """Write a presentation tree to ``path`` as indented UTF-8 JSON.

    Emoji badge labels are written as-is rather than ``\\u`` escaped.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(data, indent=2, ensure_ascii=False, default=str)
    path.write_text(text + "\n", encoding="utf-8")
    return path


def flatten_qa_analysis_for_export(view: QAAnalysisView) -> list[dict]:
    """Flatten the QA section into one row per answer.

    Questions without answers still produce one row with the answer
    columns left blank, so no question is dropped from the export.
    """
    rows: list[dict] = []
    for item in view.items:
        base = {
            "item_key":              item.key,
            "question":              item.question,
            "question_timestamp":    item.timestamp,
            "relevance":             item.relevance.badge.score,
            "relevance_tier":        str(item.relevance.badge.tier),
            "relevance_explanation": item.relevance.explanation,
        }
        if not item.answers:
            rows.append({**base, **{k: "" for k in QA_EXPORT_FIELDS if k not in base}})
            continue
        for answer in item.answers:
            rows.append(
                {
                    **base,
                    "answer_key":         answer.key,
                    "answer_timestamp":   answer.timestamp,
                    "answer_text":        answer.text,
                    "jd_match":           answer.match.badge.score,
                    "answer_tier":        str(answer.match.badge.tier),
                    "answer_explanation": answer.match.explanation,
                }
            )
    return rows


def flatten_training_for_export(view: Union[TrainingView, EmptyState]) -> list[dict]:
    """Flatten the training section into one row per recommendation.

    Multi-valued fields (resources, suggested questions) are joined with
    `` | `` so each recommendation stays on a single row.
    """
    if isinstance(view, EmptyState):
        return []
    rows: list[dict] = []
    for rec in view.recommendations:
        questions = [
            q.text for follow_up in rec.missed_follow_ups for q in follow_up.questions
        ]
        rows.append(
            {
                "recommendation_key":     rec.key,
                "area":                   rec.area,
                "priority":               str(rec.priority),
                "priority_variant":       str(rec.priority_variant),
                "issue":                  rec.issue,
                "recommendation":         rec.recommendation,
                "expected_improvement":   rec.expected_improvement,
                "resources":              " | ".join(rec.resources),
                "missed_follow_up_count": len(rec.missed_follow_ups),
                "suggested_questions":    " | ".join(questions),
            }
        )
    return rows
