"""Percentage helpers shared by the metrics components."""

import math


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values, as the dashboard client does."""
    return int(math.floor(value + 0.5))


def percentage(part: float, whole: float) -> int:
    """Rounded part/whole*100, or 0 when whole is 0."""
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)
