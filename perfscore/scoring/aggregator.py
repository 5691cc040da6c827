from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Mapping


def round_half_away_array(values: np.ndarray, decimals: int = 2) -> np.ndarray:
    """Vectorised :func:`round_half_away`; NaN and infinities pass through."""
    factor = 10**decimals
    with np.errstate(over="ignore", invalid="ignore"):
        scaled = np.asarray(values, dtype=np.float64) * factor
        magnitude = np.abs(scaled)
        floored = np.floor(magnitude)
        rounded = floored + (magnitude - floored >= 0.5)
        result = np.sign(scaled) * rounded / factor
    return np.where(np.isfinite(scaled), result, np.asarray(values, dtype=np.float64))


def round_half_away(value: float, decimals: int = 2) -> float:
    """Round ``value`` to ``decimals`` places, ties away from zero.

    The tie is decided on ``value * 10**decimals`` as a float, so ``6.125`` rounds to
    ``6.13`` while ``1.005`` (stored as 1.00499...) rounds to ``1.0``. The fractional
    part is compared against 0.5 rather than adding 0.5, so values just below a tie
    such as ``0.49999999999999994`` are not pushed over it. NaN and infinities pass
    through unchanged.
    """
    return float(round_half_away_array(np.asarray(value), decimals))


def compute_weighted_score(
    scores: Mapping[str, float],
    weights: Mapping[str, float],
) -> float:
    """Combine category scores into one composite score.

    The denominator is the sum of every weight supplied, including weights for
    categories that have no score. Scored categories without a weight count as 0.
    A zero total weight yields 0.
    """
    total_weight = sum(weights.values())
    if total_weight == 0:
        return 0.0

    weighted_sum = sum(score * weights.get(category, 0) for category, score in scores.items())
    return round_half_away(weighted_sum / total_weight, 2)


def decompose(
    scores: Mapping[str, float],
    weights: Mapping[str, float],
) -> dict[str, dict[str, float]]:
    total_weight = sum(weights.values())

    breakdown: dict[str, dict[str, float]] = {}
    for category, score in scores.items():
        weight = weights.get(category, 0)
        contribution = score * weight / total_weight if total_weight != 0 else 0.0
        breakdown[category] = {
            "raw": round_half_away(score, 2),
            "weight": float(weight),
            "contribution": round_half_away(contribution, 2),
        }
    return breakdown
