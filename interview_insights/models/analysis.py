"""
Question/answer analysis models.

``QAItem`` is one recruiter question together with the candidate answers
given to it, in chronological order.  ``Answer.jd_match`` is the only answer
score the engine classifies; ``match_score``, ``match_level``,
``match_explanation`` and ``sentiment`` are passed through untouched.

Inbound payloads use camelCase keys (``jdMatch``); snake_case is accepted
too.  Unknown keys are ignored so newer upstream versions stay readable.

Insights
--------
The upstream ``insights`` list is loosely shaped: plain strings, objects
carrying the text under one of several keys, or anything else.  Each value
is resolved once, here, into one of three tagged variants::

    TextInsight(text)          -- a plain string
    StructuredInsight(value)   -- a mapping or list (JSON object / array)
    OpaqueInsight(value)       -- numbers, booleans, null, ...

All models are frozen: a payload is read once per render pass and never
mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

INBOUND_MODEL_CONFIG = ConfigDict(
    frozen=True,
    extra="ignore",
    alias_generator=to_camel,
    populate_by_name=True,
)


class Answer(BaseModel):
    """One candidate answer to a recruiter question.

    Attributes:
        text: Full answer transcript text.
        timestamp: Display timestamp from the transcript, e.g. ``"00:03:12"``.
        jd_match: 0–100 score of how well the answer addresses the question.
        match_score: Informational upstream score; not used by the engine.
        match_level: Informational upstream label; not used by the engine.
        match_explanation: Informational upstream text; not used by the engine.
        sentiment: Informational sentiment tag; not used by the engine.
        reasoning: Author-supplied justification for ``jd_match``, if any.
    """

    model_config = INBOUND_MODEL_CONFIG

    text: str
    timestamp: str
    jd_match: int
    match_score: Optional[float] = None
    match_level: Optional[str] = None
    match_explanation: Optional[str] = None
    sentiment: Optional[str] = None
    reasoning: Optional[str] = None


class QAItem(BaseModel):
    """A recruiter question and the answers it received.

    Attributes:
        question: Question text as asked.
        timestamp: Display timestamp of the question.
        relevance: 0–100 relevance of the question to the job description.
        reasoning: Author-supplied justification for ``relevance``, if any.
        answers: Candidate answers in chronological order.
    """

    model_config = INBOUND_MODEL_CONFIG

    question: str
    timestamp: str
    relevance: int
    reasoning: Optional[str] = None
    answers: list[Answer] = []


# ── Insight variants ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TextInsight:
    text: str


@dataclass(frozen=True)
class StructuredInsight:
    value: Union[Mapping[str, Any], list[Any]]


@dataclass(frozen=True)
class OpaqueInsight:
    value: Any


Insight = Union[TextInsight, StructuredInsight, OpaqueInsight]


def parse_insight(raw: Any) -> Insight:
    """Resolve one raw insight value into its tagged variant.

    Already-resolved variants are returned as-is, so parsing is idempotent.
    """
    if isinstance(raw, (TextInsight, StructuredInsight, OpaqueInsight)):
        return raw
    if isinstance(raw, str):
        return TextInsight(raw)
    if isinstance(raw, Mapping):
        return StructuredInsight(dict(raw))
    if isinstance(raw, (list, tuple)):
        return StructuredInsight(list(raw))
    return OpaqueInsight(raw)
