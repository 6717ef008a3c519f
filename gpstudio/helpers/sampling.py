from __future__ import annotations

import random
from typing import List


def generate_sample_ids(count: int, max_id: int, rng: random.Random | None = None) -> List[int]:
    """Return *count* distinct ids drawn uniformly from ``[0, max_id)``.

    Raises ValueError when the range cannot supply *count* distinct ids.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count > max_id:
        raise ValueError(f"Cannot sample {count} distinct ids from a range of {max(max_id, 0)}")

    rng = rng or random
    return rng.sample(range(max_id), count)
