from __future__ import annotations

from pathlib import Path

import pytest

from perfscore.config.settings import ScoringConfig, Settings
from perfscore.feedback.summary import FeedbackQuestion, FeedbackResponse
from perfscore.scoring.models import KPI, KpiScore, PerformanceRecord


@pytest.fixture  # type: ignore[misc]
def scoring_config() -> ScoringConfig:
    return ScoringConfig()


@pytest.fixture  # type: ignore[misc]
def settings(scoring_config: ScoringConfig, tmp_path: Path) -> Settings:
    return Settings(
        scoring=scoring_config,
        output_dir=Path(str(tmp_path)) / "outputs",
    )


@pytest.fixture  # type: ignore[misc]
def sample_kpis() -> list[KPI]:
    return [
        KPI(
            id="kpi_sales",
            org_id="org_1",
            name="Quarterly sales",
            category="Sales",
            weight=50,
            target=100_000,
            unit="USD",
        ),
        KPI(
            id="kpi_quality",
            org_id="org_1",
            name="Defect rate",
            category="Quality",
            weight=30,
            target=2,
            unit="%",
        ),
        KPI(
            id="kpi_csat",
            org_id="org_1",
            name="Customer satisfaction",
            category="Customer Service",
            weight=20,
            target=90,
            unit="%",
        ),
    ]


@pytest.fixture  # type: ignore[misc]
def sample_record() -> PerformanceRecord:
    return PerformanceRecord(
        id="perf_001",
        org_id="org_1",
        user_id="emp_042",
        period="2025-Q1",
        kpi_scores=[
            KpiScore(kpi_id="kpi_sales", score=80),
            KpiScore(kpi_id="kpi_quality", score=90),
            KpiScore(kpi_id="kpi_csat", score=70),
        ],
        attendance_score=95,
        feedback_score=60,
    )


@pytest.fixture  # type: ignore[misc]
def feedback_questions() -> list[FeedbackQuestion]:
    return [
        FeedbackQuestion(id="q_collab", type="likert", text="Collaborates well"),
        FeedbackQuestion(id="q_comm", type="rating", text="Communicates clearly"),
        FeedbackQuestion(id="q_notes", type="text", text="Anything else?"),
    ]


@pytest.fixture  # type: ignore[misc]
def feedback_responses() -> list[FeedbackResponse]:
    return [
        FeedbackResponse(response_payload={"q_collab": 8, "q_comm": 6, "q_notes": "Great mentor"}),
        FeedbackResponse(response_payload={"q_collab": "10", "q_comm": 3}),
        FeedbackResponse(response_payload={"q_collab": 1, "q_unknown": 5}),
    ]
