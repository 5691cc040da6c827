from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np
import structlog
from pydantic import BaseModel, Field

from perfscore.errors import FeedbackError
from perfscore.scoring.aggregator import round_half_away

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = structlog.get_logger(__name__)

SCORED_QUESTION_TYPES = frozenset({"likert", "rating", "single_choice"})
TEXT_QUESTION_TYPE = "text"

DISTRIBUTION_BUCKETS: list[tuple[str, float]] = [
    ("1-2", 2),
    ("3-4", 4),
    ("5-6", 6),
    ("7-8", 8),
]
TOP_BUCKET = "9-10"


class FeedbackQuestion(BaseModel):
    id: str
    type: str
    text: str | None = None


class FeedbackResponse(BaseModel):
    response_payload: dict[str, Any] = Field(default_factory=dict)


class FeedbackSummary(BaseModel):
    employee_id: str
    total_responses: int
    overall_average: float
    scores_by_question: dict[str, float]
    qualitative_feedback: dict[str, list[str]]
    score_distribution: dict[str, int]


def score_distribution(scores: Sequence[float]) -> dict[str, int]:
    distribution = {label: 0 for label, _ in DISTRIBUTION_BUCKETS}
    distribution[TOP_BUCKET] = 0

    for score in scores:
        for label, upper in DISTRIBUTION_BUCKETS:
            if score <= upper:
                distribution[label] += 1
                break
        else:
            distribution[TOP_BUCKET] += 1

    return distribution


def _as_score(question_id: str, answer: Any) -> float:
    try:
        return float(answer)
    except (TypeError, ValueError) as exc:
        msg = f"Answer to question '{question_id}' is not numeric: {answer!r}"
        raise FeedbackError(msg) from exc


def summarize_feedback(
    employee_id: str,
    questions: Sequence[FeedbackQuestion],
    responses: Sequence[FeedbackResponse],
) -> FeedbackSummary:
    by_id = {q.id: q for q in questions}
    scores_by_question: dict[str, list[float]] = {}
    qualitative: dict[str, list[str]] = {}

    for response in responses:
        for question_id, answer in response.response_payload.items():
            question = by_id.get(question_id)
            if question is None:
                continue

            if question.type in SCORED_QUESTION_TYPES:
                scores_by_question.setdefault(question_id, []).append(
                    _as_score(question_id, answer)
                )
            elif question.type == TEXT_QUESTION_TYPE:
                qualitative.setdefault(question_id, []).append(str(answer))

    all_scores = [s for scores in scores_by_question.values() for s in scores]
    overall = float(np.mean(all_scores)) if all_scores else 0.0

    summary = FeedbackSummary(
        employee_id=employee_id,
        total_responses=len(responses),
        overall_average=round_half_away(overall, 2),
        scores_by_question={q: float(np.mean(s)) for q, s in scores_by_question.items()},
        qualitative_feedback=qualitative,
        score_distribution=score_distribution(all_scores),
    )

    logger.info(
        "feedback_summarized",
        employee_id=employee_id,
        responses=summary.total_responses,
        overall_average=summary.overall_average,
    )
    return summary
