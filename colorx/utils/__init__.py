from .dimension import get_dimension
from .num_utils import round_half_up, unit_to_byte, check_positive_int

__all__ = [
    "get_dimension",
    "round_half_up",
    "unit_to_byte",
    "check_positive_int",
]
