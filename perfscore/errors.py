from __future__ import annotations


class PerfScoreError(ValueError):
    pass


class ScoreRangeError(PerfScoreError):
    def __init__(self, score: float, min_score: float, max_score: float) -> None:
        self.score = score
        self.min_score = min_score
        self.max_score = max_score
        super().__init__(f"Score {score} is outside the range [{min_score}, {max_score}]")


class FeedbackError(PerfScoreError):
    pass
