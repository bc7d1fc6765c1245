from datetime import date, datetime, timedelta, timezone

from rtime.core.stdformat import StdFormatter

VALUE = datetime(2023, 3, 5, 0, 7, 9)


def test_unpadded_fields():
    assert StdFormatter.strftime(VALUE, "%-d.%-m.%-y %-H:%-M:%-S") == "5.3.23 0:7:9"


def test_twelve_hour_clock():
    assert StdFormatter.strftime(VALUE, "%-I") == "12"
    assert StdFormatter.strftime(VALUE.replace(hour=15), "%-I%p") == "3PM"


def test_day_of_year_and_space_padded_day():
    assert StdFormatter.strftime(VALUE, "%-j|%e") == "64| 5"


def test_escaped_percent_is_untouched():
    assert StdFormatter.strftime(VALUE, "%%-d %%e %d") == "%-d %e 05"


def test_colon_offset():
    aware = VALUE.replace(tzinfo=timezone(-timedelta(hours=5, minutes=30)))
    assert StdFormatter.strftime(aware, "%:z") == "-05:30"
    assert StdFormatter.strftime(VALUE.replace(tzinfo=timezone.utc), "%:z") == "+00:00"
    assert StdFormatter.strftime(VALUE, "[%:z]") == "[]"


def test_plain_date():
    assert StdFormatter.strftime(date(2023, 3, 5), "%-d.%m %-H:%M") == "5.03 0:00"


def test_other_directives_go_to_strftime():
    assert StdFormatter.expand(VALUE, "%Y-%m-%d %A") == "%Y-%m-%d %A"
