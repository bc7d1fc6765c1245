"""
core/timestamp.py

RTime: a `datetime` that formats Russian placeholder tokens.

Construction mirrors the standard constructors (now, date, unix, unix_milli,
unix_micro) and every pass-through operation (add, add_date, utc, local,
in_tz, truncate, round) returns an RTime again, so chains keep the type:

    t = rtime.date(2023, 3, 1, 2, 48, 5, tzinfo=timezone.utc)
    t.add(timedelta(days=1)).format(rtime.GOST2016_WORD)  # 2 марта 2023 г.
"""

from datetime import datetime, timedelta, timezone

from dateutil import tz as dateutil_tz
from dateutil.relativedelta import relativedelta

from rtime.core.formatter import LayoutFormatter
from rtime.utils.timeparse import TimeParser

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ZERO = datetime(1, 1, 1)
_ZERO_UTC = datetime(1, 1, 1, tzinfo=timezone.utc)


class RTime(datetime):
    """datetime with a Russian-aware `format`."""

    @classmethod
    def wrap(cls, value):
        """Return `value` (a date or datetime) as an RTime."""
        if isinstance(value, cls):
            return value
        return cls(
            value.year, value.month, value.day,
            getattr(value, "hour", 0), getattr(value, "minute", 0),
            getattr(value, "second", 0), getattr(value, "microsecond", 0),
            getattr(value, "tzinfo", None), fold=getattr(value, "fold", 0),
        )

    def format(self, layout, tables=None):
        """
        Format with a layout mixing strftime directives, Russian tokens and
        literal text:

            t.format("ПН/%a, %-d Янв/%b %Y")  # СР/Wed, 1 Мар/Mar 2023
        """
        return LayoutFormatter(tables).format(self, layout)

    def __format__(self, spec):
        if not spec:
            return str(self)
        return self.format(spec)

    # ----- Arithmetic -----
    def add(self, delta):
        """Return the time shifted by `delta` (a timedelta)."""
        return self.wrap(self + delta)

    def add_date(self, years=0, months=0, days=0):
        """
        Return the time shifted by calendar years, months and days.
        Month overflow clamps to the last day ("31 Jan + 1 month" is 28/29 Feb).
        """
        return self.wrap(self + relativedelta(years=years, months=months, days=days))

    # ----- Zones -----
    def utc(self):
        return self.wrap(self.astimezone(timezone.utc))

    def local(self):
        return self.wrap(self.astimezone(dateutil_tz.tzlocal()))

    def in_tz(self, zone):
        """Same instant shown in `zone` (a tzinfo or a zone name like 'Europe/Moscow')."""
        if isinstance(zone, str):
            zone = TimeParser.resolve_zone(zone)
        return self.wrap(self.astimezone(zone))

    # ----- Rounding -----
    def _since_zero(self):
        zero = _ZERO if self.tzinfo is None else _ZERO_UTC
        return self - zero

    def truncate(self, delta):
        """Round down to a multiple of `delta` since the zero time."""
        if delta <= timedelta(0):
            return self
        return self.wrap(self - self._since_zero() % delta)

    def round(self, delta):
        """
        Round to the nearest multiple of `delta` since the zero time; halves
        round up. Rounding up past the largest datetime saturates at it.
        """
        if delta <= timedelta(0):
            return self
        rest = self._since_zero() % delta
        if rest + rest < delta:
            return self.wrap(self - rest)
        try:
            return self.wrap(self + (delta - rest))
        except OverflowError:
            return self.wrap(datetime.max.replace(tzinfo=self.tzinfo))


def now(tz=None):
    """Current time; local zone (aware) unless `tz` is given."""
    return RTime.wrap(datetime.now(tz if tz is not None else dateutil_tz.tzlocal()))


def date(year, month, day, hour=0, minute=0, second=0, microsecond=0, tzinfo=None):
    return RTime(year, month, day, hour, minute, second, microsecond, tzinfo)


def _from_epoch(delta, tz):
    return RTime.wrap((_EPOCH + delta).astimezone(tz if tz is not None else dateutil_tz.tzlocal()))


def unix(sec, nsec=0, tz=None):
    """Time `sec` seconds and `nsec` nanoseconds after the epoch (nanoseconds truncated to µs)."""
    return _from_epoch(timedelta(seconds=sec, microseconds=nsec // 1000), tz)


def unix_milli(msec, tz=None):
    return _from_epoch(timedelta(milliseconds=msec), tz)


def unix_micro(usec, tz=None):
    return _from_epoch(timedelta(microseconds=usec), tz)
