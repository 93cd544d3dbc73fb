import math

import numpy as np
from numpy import ndarray as NDArray


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going towards +inf (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def np_round_half_up(values: NDArray) -> NDArray:
    """Vectorized: same tie-breaking as round_half_up, returned as int64."""
    return np.floor(np.asarray(values, dtype=float) + 0.5).astype(np.int64)
