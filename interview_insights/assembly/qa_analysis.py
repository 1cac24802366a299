"""
QA analysis assembler: question/answer groups + insights -> QAAnalysisView.

Per item, in input order:
  1. Classify ``relevance`` and resolve its explanation (question kind).
  2. For each answer, in input order, classify ``jd_match`` and resolve its
     explanation (answer kind).
  3. Build an answer preview: the first ``preview_chars`` characters plus
     "..." when the text is longer.  The full text stays on the view.

Insights are normalized independently of the items.

An empty item list produces an ``EmptyState`` so the renderer can show
"no analysis yet" instead of an empty section.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional

from interview_insights.assembly.insights import normalize_insight
from interview_insights.assembly.views import (
    AnswerView,
    EmptyState,
    ExplainedScore,
    InsightView,
    QAAnalysisView,
    QAItemView,
)
from interview_insights.models.analysis import Answer, QAItem
from interview_insights.scoring.explanations import EXPLANATION_TITLES, explain
from interview_insights.scoring.tiers import score_badge
from interview_insights.taxonomy.score_taxonomy import AnalysisKind

DEFAULT_PREVIEW_CHARS = 200
ELLIPSIS = "..."

QA_SECTION_TITLE = "Question & Answer Analysis"
INSIGHTS_TITLE = "Analysis Insights"
RELEVANCE_PREFIX = "JD Relevance"
ANSWER_MATCH_PREFIX = "Answer Match"

QA_EMPTY_STATE = EmptyState(
    key="qa-analysis-empty",
    title="No conversation analysis available yet.",
    detail="Analysis will appear here once processing is complete.",
)


def explained_score(
    kind:      AnalysisKind,
    score:     int,
    reasoning: Optional[str],
    prefix:    str,
) -> ExplainedScore:
    """Classify ``score`` and attach its explanation."""
    return ExplainedScore(
        badge=score_badge(score, prefix),
        explanation_title=EXPLANATION_TITLES[kind],
        explanation=explain(kind, score, reasoning),
        is_authored=bool(reasoning),
    )


def preview_text(text: str, preview_chars: int = DEFAULT_PREVIEW_CHARS) -> str:
    if len(text) > preview_chars:
        return text[:preview_chars] + ELLIPSIS
    return text


def _build_answer(
    answer: Answer,
    item_index: int,
    answer_index: int,
    preview_chars: int,
) -> AnswerView:
    return AnswerView(
        key=f"answer-{item_index}-{answer_index}",
        index=answer_index,
        text=answer.text,
        preview=preview_text(answer.text, preview_chars),
        is_truncated=len(answer.text) > preview_chars,
        timestamp=answer.timestamp,
        match=explained_score(
            AnalysisKind.ANSWER_QUALITY,
            answer.jd_match,
            answer.reasoning,
            ANSWER_MATCH_PREFIX,
        ),
        match_score=answer.match_score,
        match_level=answer.match_level,
        match_explanation=answer.match_explanation,
        sentiment=answer.sentiment,
    )


def _build_item(item: QAItem, index: int, preview_chars: int) -> QAItemView:
    return QAItemView(
        key=f"qa-item-{index}",
        index=index,
        question=item.question,
        timestamp=item.timestamp,
        relevance=explained_score(
            AnalysisKind.QUESTION_RELEVANCE,
            item.relevance,
            item.reasoning,
            RELEVANCE_PREFIX,
        ),
        answers=tuple(
            _build_answer(answer, index, a_idx, preview_chars)
            for a_idx, answer in enumerate(item.answers)
        ),
    )


def assemble_qa_analysis(
    items:         Sequence[QAItem],
    insights:      Sequence[Any] = (),
    preview_chars: int = DEFAULT_PREVIEW_CHARS,
) -> QAAnalysisView:
    """Build the QA analysis section.

    Args:
        items:         Validated QAItem list, in transcript order.
        insights:      Raw or resolved insight values.
        preview_chars: Answer preview length before truncation.

    Returns:
        QAAnalysisView whose ``items[i]`` corresponds to ``items[i]`` of the
        input, or whose ``empty_state`` is set when there are no items.
    """
    item_views = tuple(
        _build_item(item, idx, preview_chars) for idx, item in enumerate(items)
    )
    insight_views = tuple(
        InsightView(key=f"insight-{idx}", index=idx, text=normalize_insight(raw))
        for idx, raw in enumerate(insights)
    )
    return QAAnalysisView(
        title=QA_SECTION_TITLE,
        items=item_views,
        insights_title=INSIGHTS_TITLE,
        insights=insight_views,
        empty_state=None if item_views else QA_EMPTY_STATE,
    )
