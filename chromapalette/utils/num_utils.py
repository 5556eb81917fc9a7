import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (``round`` would go to even)."""
    return int(math.floor(value + 0.5))


def round_to(value: float, places: int) -> float:
    """Round half up to ``places`` decimals."""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def nan_to_zero(value: float) -> float:
    return 0.0 if math.isnan(value) else value
