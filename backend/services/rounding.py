"""Integer rounding shared by every percentage and score in a match run."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity.

    ``round_half_up(12.5) == 13`` where the built-in ``round`` gives 12.
    """
    return math.floor(value + 0.5)
