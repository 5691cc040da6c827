from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class PerformanceStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    REVIEWED = "reviewed"


class KPI(BaseModel):
    id: str
    org_id: str
    name: str
    description: str | None = None
    category: str
    weight: float = Field(ge=0.0, le=100.0)
    target: float
    unit: str


class KpiScore(BaseModel):
    kpi_id: str
    score: float
    achieved: float = 0.0
    target: float = 0.0


class PerformanceRecord(BaseModel):
    id: str
    org_id: str
    user_id: str
    period: str
    kpi_scores: list[KpiScore] = Field(default_factory=list)
    overall_score: float = 0.0
    attendance_score: float = 0.0
    feedback_score: float = 0.0
    status: PerformanceStatus = PerformanceStatus.PENDING
