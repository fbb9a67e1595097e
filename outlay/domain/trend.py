"""Period-over-period trend calculation."""

from enum import Enum

from outlay.domain.models import Money


class Trend(Enum):
    """Outcomes of a comparison that has no meaningful percentage."""

    NO_SIGNAL = "no signal"
    NO_BASELINE = "no baseline"


def percent_change(current: Money, previous: Money) -> int | Trend:
    """Signed whole-percent change from ``previous`` to ``current``.

    Halves round away from zero. The division is done in integer arithmetic so
    the result is exact for any pair of totals.

    Args:
        current: Total for the period being reported.
        previous: Total for the immediately preceding period.

    Returns:
        Percentage change, ``Trend.NO_SIGNAL`` when both totals are zero, or
        ``Trend.NO_BASELINE`` when only the previous total is zero.

    Raises:
        ValueError: If either total is negative.
    """
    if current < 0 or previous < 0:
        raise ValueError("Totals must not be negative")

    if previous == 0:
        return Trend.NO_SIGNAL if current == 0 else Trend.NO_BASELINE

    delta = 100 * (current - previous)
    rounded = (2 * abs(delta) + previous) // (2 * previous)
    return rounded if delta >= 0 else -rounded


def describe_change(change: int | Trend) -> str:
    """Display text for a trend result, e.g. ``+12%`` or ``no baseline``."""
    if isinstance(change, Trend):
        return change.value
    if change > 0:
        return f"+{change}%"
    return f"{change}%"
