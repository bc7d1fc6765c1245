#rtime\utils\timeparse.py
"""
Time parsing utilities implemented as a class.
- TimeParser.to_dt(text, tz)
- TimeParser.resolve_zone(name)
"""

from dateutil import parser as dateparser
from dateutil import tz as dateutil_tz


class TimeParser:
    """Text → datetime / tzinfo parsing for CLI input and zone names."""

    @staticmethod
    def to_dt(text, tz=None):
        """
        Parse a timestamp string (ISO 8601 or free form) with dateutil.
        Naive results get `tz` attached when given. Returns None on failure.
        """
        text = (text or "").strip()
        if not text:
            return None
        try:
            dt = dateparser.parse(text)
        except (ValueError, OverflowError):
            return None
        if dt.tzinfo is None and tz is not None:
            dt = dt.replace(tzinfo=tz)
        return dt

    @staticmethod
    def resolve_zone(name):
        """Resolve a zone name via dateutil; unknown names raise ValueError."""
        zone = dateutil_tz.gettz(name)
        if zone is None:
            raise ValueError(f"Unknown time zone: {name}")
        return zone
