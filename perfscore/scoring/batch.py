from __future__ import annotations

import json
from typing import TYPE_CHECKING

import polars as pl
import structlog

from perfscore.scoring.aggregator import round_half_away_array

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

logger = structlog.get_logger(__name__)


def load_weights(path: Path) -> dict[str, float]:
    with path.open(encoding="utf-8") as fh:
        raw = json.load(fh)

    if not isinstance(raw, dict):
        msg = f"{path} must contain a JSON object of category weights"
        raise ValueError(msg)
    return {str(category): float(weight) for category, weight in raw.items()}


def load_frame(path: Path) -> pl.DataFrame:
    if path.suffix == ".parquet":
        return pl.read_parquet(path)
    return pl.read_csv(path)


def _composite_expr(categories: list[str], weights: Mapping[str, float]) -> pl.Expr:
    total_weight = sum(weights.values())
    if total_weight == 0:
        return pl.lit(0.0)

    weighted_sum = sum(
        (
            pl.col(c).cast(pl.Float64).fill_null(0.0) * float(weights.get(c, 0))
            for c in categories
        ),
        pl.lit(0.0),
    )
    return weighted_sum / total_weight


def score_frame(
    frame: pl.DataFrame,
    weights: Mapping[str, float],
    id_column: str = "employee_id",
) -> pl.DataFrame:
    """Add a ``composite_score`` column computed from every category column.

    Null cells contribute nothing while the category weight still counts in the
    denominator. Unweighted columns are multiplied by 0, so a NaN in them still
    propagates, as with :func:`compute_weighted_score`.
    """
    if id_column not in frame.columns:
        msg = f"Column '{id_column}' not found in input"
        raise ValueError(msg)

    categories = [c for c in frame.columns if c != id_column]
    for c in categories:
        dtype = frame.schema[c]
        if not (dtype.is_numeric() or dtype == pl.Null):
            msg = f"Category column '{c}' is not numeric ({dtype})"
            raise ValueError(msg)

    logger.info("batch_scoring_start", rows=frame.height, categories=len(categories))

    scored = frame.with_columns(_composite_expr(categories, weights).alias("composite_score"))
    rounded = round_half_away_array(scored["composite_score"].to_numpy(), 2)

    result = scored.with_columns(
        pl.Series("composite_score", rounded, dtype=pl.Float64)
    ).sort("composite_score", descending=True)

    if result.height > 0:
        logger.info(
            "batch_scoring_complete",
            rows=result.height,
            mean_score=round(float(result["composite_score"].mean()), 2),
        )
    return result
