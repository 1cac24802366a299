"""
Plain-text terminal formatters for the ``analyze`` CLI command.

All formatters accept assembled view objects and return multi-line strings
suitable for ``typer.echo()``.  They only lay out what the assemblers
already decided: tiers, labels, explanations and ordering are never
recomputed here.

No third-party dependencies (no ``rich``, no ``colorama``).

Badge colours and display variants are shown as bracketed tags, e.g.
``[green]`` or ``[destructive]``, so the output stays greppable.
"""

from __future__ import annotations

import textwrap
from typing import Union

from interview_insights.assembly.views import (
    EmptyState,
    ExplainedScore,
    FollowUpView,
    QAAnalysisView,
    RecommendationView,
    TrainingView,
)

_WRAP_WIDTH = 88


def _wrap(text: str, indent: str) -> list[str]:
    return textwrap.wrap(
        text,
        width=_WRAP_WIDTH,
        initial_indent=indent,
        subsequent_indent=indent,
    ) or [indent.rstrip()]


def format_empty_state(empty: EmptyState) -> str:
    lines = [f"  ({empty.title})"]
    if empty.detail:
        lines.append(f"  {empty.detail}")
    return "\n".join(lines)


def format_explained_score(score: ExplainedScore, indent: str = "    ") -> str:
    """Return the badge line plus the wrapped explanation under it."""
    badge = score.badge
    lines = [f"{indent}[{badge.color}] {badge.display_label}"]
    lines.extend(_wrap(f"{score.explanation_title}: {score.explanation}", indent + "  "))
    return "\n".join(lines)


# ── QA analysis ───────────────────────────────────────────────────────────────


def format_qa_analysis(view: QAAnalysisView) -> str:
    """Format the QA analysis section.

    Layout::

        === Question & Answer Analysis ===

          [qa-item-0] "Tell me about your last project."
            Recruiter @ 00:01:10
            [green] JD Relevance: ✅ Excellent Match (90%)
              Question Relevance to Job Description: Why 90%? ...
            [answer-0-0] Candidate @ 00:01:25
              I led the migration of ...
              [lime] Answer Match: 🟡 Good Match (72%)
                How Well Did They Answer the Question?: Why 72%? ...
    """
    lines: list[str] = ["", f"=== {view.title} ==="]

    if view.empty_state is not None:
        lines.append("")
        lines.append(format_empty_state(view.empty_state))

    for item in view.items:
        lines.append("")
        lines.append(f'  [{item.key}] "{item.question}"')
        lines.append(f"    Recruiter @ {item.timestamp}")
        lines.append(format_explained_score(item.relevance, "    "))
        for answer in item.answers:
            lines.append(f"    [{answer.key}] Candidate @ {answer.timestamp}")
            lines.extend(_wrap(answer.preview, "      "))
            lines.append(format_explained_score(answer.match, "      "))

    if view.insights:
        lines.append("")
        lines.append(f"  ---- {view.insights_title} ----")
        for insight in view.insights:
            lines.extend(_wrap(f"* {insight.text}", "  "))

    return "\n".join(lines)


# ── Training ──────────────────────────────────────────────────────────────────


def _format_follow_up(follow_up: FollowUpView) -> list[str]:
    type_part = f" {follow_up.type_label}" if follow_up.type_label else ""
    lines = [
        f"      [{follow_up.key}] [{follow_up.importance_variant}] "
        f"{follow_up.importance_label}{type_part}"
    ]
    if follow_up.specific_context:
        lines.extend(_wrap(f"Context: {follow_up.specific_context}", "        "))
    if follow_up.answer_excerpt:
        lines.extend(_wrap(f'Candidate\'s Answer: "{follow_up.answer_excerpt}"', "        "))
    lines.extend(_wrap(f"Why This Matters: {follow_up.reasoning}", "        "))
    lines.append(f"        {follow_up.questions_heading}")
    for question in follow_up.questions:
        lines.extend(_wrap(f'{question.number}. "{question.text}"', "          "))
    return lines


def _format_recommendation(rec: RecommendationView) -> list[str]:
    lines = [
        "",
        f"  [{rec.key}] {rec.area}  [{rec.priority_variant}] {rec.priority_label}",
    ]
    lines.extend(_wrap(f"Issue: {rec.issue}", "    "))
    lines.extend(_wrap(f"Recommendation: {rec.recommendation}", "    "))
    lines.extend(_wrap(f"Expected Improvement: {rec.expected_improvement}", "    "))
    if rec.resources:
        lines.append("    Training Resources:")
        for resource in rec.resources:
            lines.extend(_wrap(f"- {resource}", "      "))
    if rec.missed_follow_ups_heading:
        lines.append(f"    {rec.missed_follow_ups_heading}")
        for follow_up in rec.missed_follow_ups:
            lines.extend(_format_follow_up(follow_up))
    return lines


def format_training(view: Union[TrainingView, EmptyState]) -> str:
    """Format the recruiter training section (or its empty marker)."""
    if isinstance(view, EmptyState):
        return "\n".join(["", format_empty_state(view)])

    header = f"=== {view.title} ==="
    if view.rating_badge is not None:
        header += f"  [{view.rating_badge.variant}] {view.rating_badge.label}"
    lines: list[str] = ["", header]

    if view.strengths:
        lines.append("")
        lines.append(f"  ---- {view.strengths_heading} ----")
        for strength in view.strengths:
            lines.extend(_wrap(f"* {strength.text}", "  "))

    if view.gaps:
        lines.append("")
        lines.append(f"  ---- {view.gaps_heading} ----")
        lines.extend(_wrap(view.gaps_intro, "  "))
        for gap in view.gaps:
            lines.append("")
            lines.append(
                f"  [{gap.key}] {gap.metric}  "
                f"[{gap.severity_variant}] {gap.severity_label}"
            )
            lines.append(
                f"    Current: {gap.current_score} -> Target: {gap.target_score} "
                f"(Gap: {gap.gap} points)"
            )
            lines.extend(_wrap(f"What this means: {gap.explanation}", "    "))

    if view.recommendations:
        lines.append("")
        lines.append(f"  ---- {view.recommendations_heading} ----")
        for rec in view.recommendations:
            lines.extend(_format_recommendation(rec))

    return "\n".join(lines)
