from __future__ import annotations

from pydantic import BaseModel, Field

from perfscore.feedback.summary import FeedbackQuestion, FeedbackResponse
from perfscore.scoring.models import KPI, PerformanceRecord


class WeightedScoreRequest(BaseModel):
    scores: dict[str, float] = Field(default_factory=dict)
    weights: dict[str, float] = Field(default_factory=dict)


class WeightedScoreResponse(BaseModel):
    composite_score: float
    total_weight: float


class CategoryBreakdown(BaseModel):
    raw: float
    weight: float
    contribution: float


class DecompositionResponse(BaseModel):
    composite_score: float
    total_weight: float
    categories: dict[str, CategoryBreakdown]


class ScoreValidationRequest(BaseModel):
    score: float
    min_score: float | None = None
    max_score: float | None = None


class ScoreValidationResponse(BaseModel):
    score: float
    valid: bool
    min_score: float
    max_score: float


class PerformanceScoreRequest(BaseModel):
    kpis: list[KPI]
    record: PerformanceRecord


class PerformanceScoreResponse(BaseModel):
    user_id: str
    period: str
    kpi_weighted_score: float
    overall_score: int


class KpiScoreUpdateRequest(BaseModel):
    kpis: list[KPI]
    record: PerformanceRecord
    kpi_id: str
    score: float


class FeedbackSummaryRequest(BaseModel):
    employee_id: str
    questions: list[FeedbackQuestion]
    responses: list[FeedbackResponse] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str
    version: str
    mode: str


class FieldError(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    success: bool = False
    code: str = "VALIDATION_ERROR"
    errors: list[FieldError]
