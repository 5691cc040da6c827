from __future__ import annotations

import math


def is_valid_score(score: float, min_score: float = 0, max_score: float = 10) -> bool:
    return not math.isnan(score) and min_score <= score <= max_score
