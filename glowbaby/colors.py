from typing import Callable, Dict, Tuple
from glowbaby.constants import (
    BLUE,
    GREEN,
    RED,
    LONG_SLEEP_HOURS,
    SHORT_SLEEP_HOURS,
    SECONDS_PER_DAY,
    SLEEP,
    FEED,
)

Color = Tuple[int, int, int, int]


class ColorPolicy:
    """A named, pure mapping from a segment's span to its display color.

    The classify function receives (start_day, end_day, start_frac, end_frac)
    with the raw fractions, before any midnight-crossing adjustment.
    """

    def __init__(self, name: str, classify: Callable[[int, int, float, float], Color]):
        self.name = name
        self._classify = classify

    def __call__(
        self, start_day: int, end_day: int, start_frac: float, end_frac: float
    ) -> Color:
        return self._classify(start_day, end_day, start_frac, end_frac)

    def __repr__(self):
        return f"ColorPolicy({self.name!r})"


def segment_hours(
    start_day: int, end_day: int, start_frac: float, end_frac: float
) -> float:
    """Duration of a segment in hours.

    Assumes the segment was built from whole-second instants: the span is
    rounded to the nearest second, which removes float noise from the day
    fractions but would also swallow a genuine sub-second remainder.
    """
    days = (end_frac - start_frac) + (end_day - start_day)
    return round(days * SECONDS_PER_DAY) / 3600


def sleep_color(
    start_day: int, end_day: int, start_frac: float, end_frac: float
) -> Color:
    hours = segment_hours(start_day, end_day, start_frac, end_frac)
    if hours >= LONG_SLEEP_HOURS:
        return BLUE
    if hours >= SHORT_SLEEP_HOURS:
        return GREEN
    return RED


def feed_color(
    start_day: int, end_day: int, start_frac: float, end_frac: float
) -> Color:
    # red when the feed spans midnight
    if start_day == end_day:
        return BLUE
    return RED


SLEEP_POLICY = ColorPolicy(SLEEP, sleep_color)
FEED_POLICY = ColorPolicy(FEED, feed_color)

COLOR_POLICIES: Dict[str, ColorPolicy] = {
    SLEEP: SLEEP_POLICY,
    FEED: FEED_POLICY,
}


def get_color_policy(name: str) -> ColorPolicy:
    """Look up the color policy for a plot type, e.g. "sleep"."""
    try:
        return COLOR_POLICIES[name]
    except KeyError:
        raise ValueError(
            f"No color policy for plot type {name!r}, expected one of {sorted(COLOR_POLICIES)}"
        )
