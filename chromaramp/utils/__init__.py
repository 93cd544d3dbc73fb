from .dimension import get_dimension
from .num_utils import round_half_up, np_round_half_up

__all__ = ["get_dimension", "round_half_up", "np_round_half_up"]
