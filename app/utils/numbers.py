"""Numeric helpers shared by the analysis services."""
import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to ``ndigits`` places with halves going up.

    Built-in ``round`` uses banker's rounding (``round(2.5) == 2``), which would
    make velocities and percentages drift by one on exact halves.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round half up to the nearest integer."""
    return int(round_half_up(value))


def percentage(part: int, whole: int) -> int:
    """Share of ``part`` in ``whole`` as a rounded 0-100 integer."""
    if whole <= 0:
        return 0
    return round_int(part / whole * 100)
