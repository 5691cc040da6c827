from perfscore.feedback.summary import (
    FeedbackQuestion,
    FeedbackResponse,
    FeedbackSummary,
    score_distribution,
    summarize_feedback,
)

__all__ = [
    "FeedbackQuestion",
    "FeedbackResponse",
    "FeedbackSummary",
    "score_distribution",
    "summarize_feedback",
]
