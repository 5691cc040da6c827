from __future__ import annotations

from fastapi import APIRouter, Depends

from perfscore.api.deps import get_settings
from perfscore.api.schemas import (
    CategoryBreakdown,
    DecompositionResponse,
    ScoreValidationRequest,
    ScoreValidationResponse,
    WeightedScoreRequest,
    WeightedScoreResponse,
)
from perfscore.config.settings import Settings
from perfscore.scoring.aggregator import compute_weighted_score, decompose
from perfscore.scoring.validation import is_valid_score

router = APIRouter()


@router.post("/scores/weighted", response_model=WeightedScoreResponse)  # type: ignore[misc]
async def weighted_score(request: WeightedScoreRequest) -> WeightedScoreResponse:
    return WeightedScoreResponse(
        composite_score=compute_weighted_score(request.scores, request.weights),
        total_weight=sum(request.weights.values()),
    )


@router.post("/scores/decomposition", response_model=DecompositionResponse)  # type: ignore[misc]
async def score_decomposition(request: WeightedScoreRequest) -> DecompositionResponse:
    breakdown = decompose(request.scores, request.weights)
    return DecompositionResponse(
        composite_score=compute_weighted_score(request.scores, request.weights),
        total_weight=sum(request.weights.values()),
        categories={k: CategoryBreakdown(**v) for k, v in breakdown.items()},
    )


@router.post("/scores/validate", response_model=ScoreValidationResponse)  # type: ignore[misc]
async def validate_score(
    request: ScoreValidationRequest,
    settings: Settings = Depends(get_settings),
) -> ScoreValidationResponse:
    min_score = request.min_score if request.min_score is not None else settings.scoring.min_score
    max_score = request.max_score if request.max_score is not None else settings.scoring.max_score
    return ScoreValidationResponse(
        score=request.score,
        valid=is_valid_score(request.score, min_score, max_score),
        min_score=min_score,
        max_score=max_score,
    )
