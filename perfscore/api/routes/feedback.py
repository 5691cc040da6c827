from __future__ import annotations

from fastapi import APIRouter, HTTPException

from perfscore.api.schemas import FeedbackSummaryRequest
from perfscore.errors import FeedbackError
from perfscore.feedback.summary import FeedbackSummary, summarize_feedback

router = APIRouter()


@router.post("/feedback/summary", response_model=FeedbackSummary)  # type: ignore[misc]
async def feedback_summary(request: FeedbackSummaryRequest) -> FeedbackSummary:
    try:
        return summarize_feedback(request.employee_id, request.questions, request.responses)
    except FeedbackError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
