"""Half-up rounding for currency amounts.

Python's built-in round() uses banker's rounding (round(418.5) == 418);
fares round halves up instead.
"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest whole currency unit, halves going up."""
    return math.floor(value + 0.5)


def round_to(value: float, places: int) -> float:
    """Round to a fixed number of decimal places, halves going up."""
    scale = 10**places
    return math.floor(value * scale + 0.5) / scale
