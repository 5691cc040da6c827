from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from perfscore.api.deps import get_settings
from perfscore.api.schemas import (
    KpiScoreUpdateRequest,
    PerformanceScoreRequest,
    PerformanceScoreResponse,
)
from perfscore.config.settings import Settings
from perfscore.errors import ScoreRangeError
from perfscore.scoring.aggregator import round_half_away
from perfscore.scoring.models import PerformanceRecord
from perfscore.scoring.performance import PerformanceScorer, kpi_weighted_score
from perfscore.scoring.validation import is_valid_score

router = APIRouter()


@router.post("/performance/score", response_model=PerformanceScoreResponse)  # type: ignore[misc]
async def performance_score(
    request: PerformanceScoreRequest,
    settings: Settings = Depends(get_settings),
) -> PerformanceScoreResponse:
    scorer = PerformanceScorer(settings.scoring)
    return PerformanceScoreResponse(
        user_id=request.record.user_id,
        period=request.record.period,
        kpi_weighted_score=round_half_away(
            kpi_weighted_score(request.kpis, request.record.kpi_scores), 2
        ),
        overall_score=scorer.calculate(request.kpis, request.record),
    )


@router.put("/performance/kpi-score", response_model=PerformanceRecord)  # type: ignore[misc]
async def update_kpi_score(
    request: KpiScoreUpdateRequest,
    settings: Settings = Depends(get_settings),
) -> PerformanceRecord:
    config = settings.scoring
    if not is_valid_score(request.score, config.min_score, config.max_score):
        error = ScoreRangeError(request.score, config.min_score, config.max_score)
        raise HTTPException(status_code=400, detail=str(error))

    scorer = PerformanceScorer(config)
    return scorer.update_kpi_score(request.kpis, request.record, request.kpi_id, request.score)
