from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from perfscore.scoring.aggregator import round_half_away
from perfscore.scoring.models import KpiScore

if TYPE_CHECKING:
    from collections.abc import Sequence

    from perfscore.config.settings import ScoringConfig
    from perfscore.scoring.models import KPI, PerformanceRecord

logger = structlog.get_logger(__name__)


def kpi_weighted_score(kpis: Sequence[KPI], kpi_scores: Sequence[KpiScore]) -> float:
    """Weighted mean of KPI scores, counting only KPIs present in the catalog."""
    catalog = {kpi.id: kpi for kpi in kpis}

    total_score = 0.0
    total_weight = 0.0
    for entry in kpi_scores:
        kpi = catalog.get(entry.kpi_id)
        if kpi is None:
            continue
        total_score += entry.score * kpi.weight
        total_weight += kpi.weight

    return total_score / total_weight if total_weight > 0 else 0.0


class PerformanceScorer:
    def __init__(self, config: ScoringConfig) -> None:
        self.config = config

    def calculate(self, kpis: Sequence[KPI], record: PerformanceRecord) -> int:
        """Blend the KPI weighted score with attendance and feedback into an overall score."""
        if not kpis:
            return 0

        weighted = kpi_weighted_score(kpis, record.kpi_scores)
        blended = (
            weighted * self.config.kpi_blend
            + record.attendance_score * self.config.attendance_blend
            + record.feedback_score * self.config.feedback_blend
        )
        overall = int(round_half_away(blended, 0))

        logger.info(
            "performance_score_computed",
            user_id=record.user_id,
            period=record.period,
            kpi_weighted_score=round_half_away(weighted, 2),
            overall_score=overall,
        )
        return overall

    def update_kpi_score(
        self,
        kpis: Sequence[KPI],
        record: PerformanceRecord,
        kpi_id: str,
        score: float,
    ) -> PerformanceRecord:
        kpi_scores = [entry.model_copy() for entry in record.kpi_scores]

        for entry in kpi_scores:
            if entry.kpi_id == kpi_id:
                entry.score = score
                break
        else:
            kpi_scores.append(KpiScore(kpi_id=kpi_id, score=score))

        updated = record.model_copy(update={"kpi_scores": kpi_scores})
        updated.overall_score = self.calculate(kpis, updated)
        return updated
