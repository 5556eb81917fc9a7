from .default import value_or_default, nested_or_default
from .num_utils import round_half_up, round_to, nan_to_zero

__all__ = ["value_or_default", "nested_or_default", "round_half_up", "round_to", "nan_to_zero"]
