from datetime import datetime
import pytest
import pytz
from glowbaby.errors import OutOfOrderInstant
from glowbaby.timemap import day_diff, split_epoch, resolve_midnight_crossing


def test_same_calendar_date_is_day_zero(tz, zero):
    assert day_diff(zero, tz.localize(datetime(2022, 1, 1))) == 0
    assert day_diff(zero, tz.localize(datetime(2022, 1, 1, 23, 59, 59))) == 0


def test_earlier_time_on_same_date_is_still_day_zero(tz):
    noon = tz.localize(datetime(2022, 1, 1, 12))
    assert day_diff(noon, tz.localize(datetime(2022, 1, 1, 6))) == 0


def test_day_diff_counts_calendar_boundaries(tz, zero):
    assert day_diff(zero, tz.localize(datetime(2022, 1, 2, 0, 0, 1))) == 1
    assert day_diff(zero, tz.localize(datetime(2022, 2, 1, 12))) == 31
    assert day_diff(zero, tz.localize(datetime(2023, 1, 1))) == 365


def test_day_diff_is_stable_across_daylight_saving(tz):
    # Clocks spring forward on 2022-03-13 in Chicago, so only 47.5 hours
    # pass between these two, yet they are two calendar days apart.
    start = tz.localize(datetime(2022, 3, 12))
    end = tz.localize(datetime(2022, 3, 14, 0, 30))
    assert (end - start).total_seconds() / 3600 == 47.5
    assert day_diff(start, end) == 2

    # And fall back on 2022-11-06.
    start = tz.localize(datetime(2022, 11, 5, 23, 30))
    end = tz.localize(datetime(2022, 11, 6, 23, 30))
    assert day_diff(start, end) == 1


def test_day_diff_rejects_earlier_date(tz, zero):
    with pytest.raises(OutOfOrderInstant):
        day_diff(zero, tz.localize(datetime(2021, 12, 31, 23, 59)))


def test_split_epoch_fraction(zero, local_ts):
    day, frac = split_epoch(local_ts(2022, 1, 2, 22), zero, "America/Chicago")
    assert day == 1
    assert frac == pytest.approx(22 / 24)

    day, frac = split_epoch(local_ts(2022, 1, 1, 6, 30, 36), zero, "America/Chicago")
    assert day == 0
    assert frac == pytest.approx((6 + 30 / 60 + 36 / 3600) / 24)

    day, frac = split_epoch(local_ts(2022, 1, 5), zero, "America/Chicago")
    assert (day, frac) == (4, 0.0)


def test_split_epoch_day_is_non_decreasing(tz, zero, local_ts):
    start = local_ts(2022, 1, 1)
    days = [split_epoch(start + h * 3600, zero, tz)[0] for h in range(24 * 4)]
    assert days == sorted(days)
    assert days[0] == 0
    assert days[-1] == 3


def test_resolve_midnight_crossing_one_midnight():
    end_frac = resolve_midnight_crossing(1, 22 / 24, 2, 2 / 24)
    assert end_frac == pytest.approx(1.0833, abs=1e-4)
    assert end_frac > 22 / 24


def test_resolve_midnight_crossing_leaves_same_day_alone():
    assert resolve_midnight_crossing(3, 0.25, 3, 0.5) == 0.5


def test_resolve_midnight_crossing_spans_several_days():
    assert resolve_midnight_crossing(0, 23 / 24, 3, 1 / 24) == pytest.approx(
        1 / 24 + 3
    )


def test_split_epoch_reads_zero_in_local_zone(tz):
    # the same reference instant, expressed in UTC and in Chicago
    zero_utc = datetime(2022, 1, 2, 6, tzinfo=pytz.utc)
    zero_local = tz.localize(datetime(2022, 1, 2))
    assert zero_utc == zero_local

    instant = int(datetime(2022, 1, 2, 8, tzinfo=pytz.utc).timestamp())
    assert split_epoch(instant, zero_utc, tz) == split_epoch(instant, zero_local, tz)
    day, frac = split_epoch(instant, zero_utc, tz)
    assert day == 0
    assert frac == pytest.approx(2 / 24)


def test_split_epoch_utc_zero_before_local_midnight(tz):
    # 2022-01-01 00:00 UTC is still 2021-12-31 in Chicago
    zero = datetime(2022, 1, 1, tzinfo=pytz.utc)
    instant = int(datetime(2022, 1, 1, 2, tzinfo=pytz.utc).timestamp())
    day, frac = split_epoch(instant, zero, tz)
    assert day == 0
    assert frac == pytest.approx(20 / 24)


def test_split_epoch_rejects_naive_zero(tz):
    with pytest.raises(ValueError):
        split_epoch(0, datetime(2022, 1, 1), tz)
