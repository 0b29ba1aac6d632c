import datetime as dt_module
import time
from datetime import timedelta

import pytest

from fastchess.timeutil import datetime, datetime_iso, datetime_precise, duration


def test_duration_zero():
    assert duration(0) == "00:00:00"


def test_duration_mixed():
    assert duration(3661) == "01:01:01"


def test_duration_many_hours():
    assert duration(360000) == "100:00:00"


@pytest.mark.parametrize("seconds", [0, 59, 60, 3599, 3600, 86399, 123456])
def test_duration_round_trip(seconds):
    hours, minutes, secs = (int(part) for part in duration(seconds).split(":"))
    assert hours * 3600 + minutes * 60 + secs == seconds
    assert 0 <= minutes < 60
    assert 0 <= secs < 60


def test_duration_accepts_timedelta():
    assert duration(timedelta(hours=2, minutes=3, seconds=4)) == duration(2 * 3600 + 3 * 60 + 4)


def test_datetime_year_matches_clock():
    before = time.localtime().tm_year
    result = datetime("%Y")
    after = time.localtime().tm_year
    assert int(result) in (before, after)


def test_datetime_literal_pattern():
    assert datetime("fixed-text") == "fixed-text"


def test_datetime_iso_shape():
    before = time.localtime().tm_year
    result = datetime_iso()
    after = time.localtime().tm_year
    date_part, zone = result.split(" ")
    parsed = dt_module.datetime.strptime(date_part, "%Y-%m-%dT%H:%M:%S")
    assert parsed.year in (before, after)
    assert len(zone) == 5
    assert zone[0] in "+-"
    assert zone[1:].isdigit()


def test_datetime_iso_offset_matches_local_zone():
    result = datetime_iso()
    sign, hours, minutes = result[-5], int(result[-4:-2]), int(result[-2:])
    offset = (hours * 60 + minutes) * (1 if sign == "+" else -1)
    expected = (time.localtime().tm_gmtoff or 0) // 60
    assert abs(offset) == abs(expected)


def test_datetime_precise_shape():
    result = datetime_precise()
    clock, fraction = result.split(".")
    assert len(fraction) == 6
    assert fraction.isdigit()
    hours, minutes, seconds = (int(part) for part in clock.split(":"))
    assert len(clock) == 8
    assert 0 <= hours < 24
    assert 0 <= minutes < 60
    assert 0 <= seconds < 61