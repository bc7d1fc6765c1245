from datetime import datetime, timedelta, timezone

import pytest

from rtime.infra.settings import Settings
from rtime.utils.timeparse import TimeParser


def test_iso_with_offset():
    dt = TimeParser.to_dt("1993-03-20T15:21:31+03:00")
    assert dt.utcoffset() == timedelta(hours=3)
    assert dt.hour == 15


def test_naive_gets_zone():
    dt = TimeParser.to_dt("2023-03-01 02:48:05", timezone.utc)
    assert dt == datetime(2023, 3, 1, 2, 48, 5, tzinfo=timezone.utc)


@pytest.mark.parametrize("text", ["", "   ", None, "not a date at all"])
def test_unparsable(text):
    assert TimeParser.to_dt(text) is None


def test_resolve_zone():
    assert TimeParser.resolve_zone("UTC").utcoffset(datetime(2023, 1, 1)) == timedelta(0)
    with pytest.raises(ValueError):
        TimeParser.resolve_zone("Not/AZone")


def test_settings_from_env():
    settings = Settings.from_env({"RTIME_TZ": " Europe/Moscow ", "RTIME_NAMES_FILE": ""})
    assert settings.tz_name == "Europe/Moscow"
    assert settings.names_file is None
