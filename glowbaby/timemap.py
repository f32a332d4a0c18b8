"""
Map absolute instants onto the polar plot's (day, time-of-day) grid.
"""

from datetime import datetime, timezone
from typing import Tuple
import pytz
from glowbaby.constants import SECONDS_PER_DAY
from glowbaby.errors import OutOfOrderInstant


def day_diff(start: datetime, end: datetime) -> int:
    """Number of calendar days between two aware datetimes.

    The calendar dates are taken in each datetime's own zone and then
    subtracted in UTC, so daylight-saving shifts never add or lose a day.
    Zero means both fall on the same date.

    Args:
        start (datetime): e.g. the birthday at local midnight
        end (datetime): a later local time

    Raises:
        OutOfOrderInstant: if `end` is on an earlier calendar date than `start`

    Returns:
        int: e.g. 1 for 2022-01-01 23:59 -> 2022-01-02 00:00
    """
    s0 = datetime(start.year, start.month, start.day, tzinfo=timezone.utc)
    e0 = datetime(end.year, end.month, end.day, tzinfo=timezone.utc)
    if e0 < s0:
        raise OutOfOrderInstant(start, end)
    return int(e0.timestamp() - s0.timestamp()) // SECONDS_PER_DAY


def day_fraction(t: datetime) -> float:
    """Local wall-clock time of `t` as a fraction of the day, in [0, 1)."""
    return (t.hour + t.minute / 60 + t.second / 3600) / 24


def split_epoch(instant: int, zero: datetime, tz) -> Tuple[int, float]:
    """Split a unix timestamp into (day offset from zero, fraction of day).

    Both the reference date and the instant's date are read in `tz`,
    whatever zone `zero` was created in.

    Args:
        instant (int): seconds since the unix epoch
        zero (datetime): aware reference instant, day 0 of the plot
        tz (str or tzinfo): local zone, e.g. "America/Chicago"

    Raises:
        ValueError: if `zero` is naive

    Returns:
        tuple: (day, frac), e.g. (1, 0.9166666666666666) for 22:00 the day
            after zero
    """
    if zero.tzinfo is None or zero.utcoffset() is None:
        raise ValueError(f"reference instant {zero.isoformat()} has no timezone")
    if isinstance(tz, str):
        tz = pytz.timezone(tz)
    t = datetime.fromtimestamp(instant, tz)
    return day_diff(zero.astimezone(tz), t), day_fraction(t)


def resolve_midnight_crossing(
    start_day: int, start_frac: float, end_day: int, end_frac: float
) -> float:
    """Adjust a segment's end fraction so that start -> end increases.

    A segment whose end fraction is below its start fraction crossed at
    least one midnight; the day difference is added back so a single linear
    interpolation traces the arc without wrapping. Segments spanning several
    midnights are interpolated over the whole range in one sweep.

    Returns:
        float: e.g. 1.0833 for 22:00 on day D -> 02:00 on day D+1
    """
    if end_frac < start_frac:
        return end_frac + (end_day - start_day)
    return end_frac
