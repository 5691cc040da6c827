from perfscore.scoring.aggregator import compute_weighted_score, decompose, round_half_away
from perfscore.scoring.performance import PerformanceScorer, kpi_weighted_score
from perfscore.scoring.validation import is_valid_score

__all__ = [
    "PerformanceScorer",
    "compute_weighted_score",
    "decompose",
    "is_valid_score",
    "kpi_weighted_score",
    "round_half_away",
]
