"""
numbers.py
-------------------
Numeric helpers shared by analytics and the weather client.
"""
import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves rounding toward +infinity.

    Python's round() uses banker's rounding (round(2.5) == 2); percentages
    and temperatures are rounded the conventional way instead.

    Examples:
        >>> round_half_up(66.66)
        67
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
    """
    return int(math.floor(value + 0.5))
