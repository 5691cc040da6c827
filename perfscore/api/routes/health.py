from __future__ import annotations

from fastapi import APIRouter, Depends

from perfscore import __version__
from perfscore.api.deps import get_settings
from perfscore.api.schemas import HealthResponse
from perfscore.config.settings import Settings

router = APIRouter()


@router.get("/health", response_model=HealthResponse)  # type: ignore[misc]
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        mode=settings.mode.value,
    )


@router.get("/ready")  # type: ignore[misc]
async def readiness() -> dict[str, str]:
    return {"status": "ready"}
