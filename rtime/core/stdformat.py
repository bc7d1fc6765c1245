"""
core/stdformat.py

Delegated standard formatting: strftime plus a few directives that C
libraries only offer as platform extensions (unpadded fields, space-padded
day, colon offset). Those are expanded here so layouts behave the same on
every platform; everything else is left to `strftime`.
"""

from datetime import datetime, timedelta

from rtime.patterns.patterns import PORTABLE_DIRECTIVE


def _colon_offset(value):
    offset = value.utcoffset() if isinstance(value, datetime) else None
    if offset is None:
        return ""
    sign = "-" if offset < timedelta(0) else "+"
    offset = abs(offset)
    hours, rest = divmod(offset, timedelta(hours=1))
    minutes, rest = divmod(rest, timedelta(minutes=1))
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if rest:
        text += f":{rest.seconds:02d}"
        if rest.microseconds:
            text += f".{rest.microseconds:06d}"
    return text


class StdFormatter:
    """Stateless strftime front-end."""

    @staticmethod
    def expand(value, layout):
        """Replace the portable directives in `layout` with literal values."""
        hour = getattr(value, "hour", 0)

        def repl(m):
            code = m.group(1)
            if code == "%":
                return "%%"
            if code == "e":
                return f"{value.day:>2}"
            if code == ":z":
                return _colon_offset(value)
            field = code[1]
            if field == "d":
                return str(value.day)
            if field == "m":
                return str(value.month)
            if field == "y":
                return str(value.year % 100)
            if field == "j":
                return str(value.timetuple().tm_yday)
            if field == "H":
                return str(hour)
            if field == "I":
                return str(hour % 12 or 12)
            if field == "M":
                return str(getattr(value, "minute", 0))
            return str(getattr(value, "second", 0))

        return PORTABLE_DIRECTIVE.sub(repl, layout)

    @classmethod
    def strftime(cls, value, layout):
        """Format `value` with `layout` through the standard strftime."""
        return value.strftime(cls.expand(value, layout))
