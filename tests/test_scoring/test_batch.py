from __future__ import annotations

import json
import math
from typing import TYPE_CHECKING

import polars as pl
import pytest

from perfscore.scoring.aggregator import compute_weighted_score
from perfscore.scoring.batch import load_frame, load_weights, score_frame

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture  # type: ignore[misc]
def category_frame() -> pl.DataFrame:
    return pl.DataFrame(
        {
            "employee_id": ["emp_001", "emp_002", "emp_003"],
            "sales": [0.0, 10.0, None],
            "quality": [10.0, 0.0, 10.0],
        }
    )


class TestScoreFrame:
    def test_adds_sorted_composite(self, category_frame: pl.DataFrame) -> None:
        result = score_frame(category_frame, {"sales": 75, "quality": 25})

        assert "composite_score" in result.columns
        assert result.height == 3
        assert result["employee_id"][0] == "emp_002"
        assert result["composite_score"][0] == 7.5

        by_id = dict(zip(result["employee_id"], result["composite_score"], strict=True))
        assert by_id["emp_001"] == 2.5
        assert by_id["emp_003"] == 2.5

    def test_missing_id_column(self, category_frame: pl.DataFrame) -> None:
        with pytest.raises(ValueError, match="user_id"):
            score_frame(category_frame, {"sales": 1}, id_column="user_id")

    def test_zero_weights(self, category_frame: pl.DataFrame) -> None:
        result = score_frame(category_frame, {})
        assert result["composite_score"].to_list() == [0.0, 0.0, 0.0]

    def test_id_column_only_scores_zero(self) -> None:
        frame = pl.DataFrame({"employee_id": ["emp_001", "emp_002"]})
        result = score_frame(frame, {"sales": 1})

        assert result.height == 2
        assert result["composite_score"].to_list() == [0.0, 0.0]

    def test_matches_per_row_weighted_score(self, category_frame: pl.DataFrame) -> None:
        weights = {"sales": 30, "quality": 25, "tenure": 25}
        result = score_frame(category_frame, weights)

        by_id = dict(zip(result["employee_id"], result["composite_score"], strict=True))
        assert by_id["emp_001"] == compute_weighted_score({"sales": 0.0, "quality": 10.0}, weights)
        assert by_id["emp_002"] == compute_weighted_score({"sales": 10.0, "quality": 0.0}, weights)
        assert by_id["emp_003"] == compute_weighted_score({"quality": 10.0}, weights)

    def test_nan_in_unweighted_column_propagates(self) -> None:
        frame = pl.DataFrame({"employee_id": ["emp_001"], "sales": [5.0], "bonus": [float("nan")]})
        result = score_frame(frame, {"sales": 1})
        assert math.isnan(result["composite_score"][0])

    def test_non_numeric_category_rejected(self) -> None:
        frame = pl.DataFrame({"employee_id": ["emp_001"], "sales": ["high"]})
        with pytest.raises(ValueError, match="sales"):
            score_frame(frame, {"sales": 1})


class TestLoaders:
    def test_load_weights(self, tmp_path: Path) -> None:
        path = tmp_path / "weights.json"
        path.write_text(json.dumps({"sales": 70, "quality": 30}), encoding="utf-8")
        assert load_weights(path) == {"sales": 70.0, "quality": 30.0}

    def test_load_weights_rejects_list(self, tmp_path: Path) -> None:
        path = tmp_path / "weights.json"
        path.write_text(json.dumps([1, 2]), encoding="utf-8")
        with pytest.raises(ValueError, match="JSON object"):
            load_weights(path)

    def test_load_frame_csv_and_parquet(
        self, category_frame: pl.DataFrame, tmp_path: Path
    ) -> None:
        csv_path = tmp_path / "scores.csv"
        parquet_path = tmp_path / "scores.parquet"
        category_frame.write_csv(csv_path)
        category_frame.write_parquet(parquet_path)

        assert load_frame(csv_path).height == 3
        assert load_frame(parquet_path).columns == category_frame.columns
