#rtime\infra\__init__.py

from .constants import (ANSIC, CONSTANTS, DAYS_IN_WEEK, GOST2003_NUMERIC_REVERSE,
                        GOST2003_WORD, GOST2016_NUMERIC, GOST2016_WORD, KITCHEN,
                        LAYOUT, MONTHS_IN_YEAR, RFC822, RFC822Z, RFC850, RFC1123,
                        RFC1123Z, RFC3339, RFC3339_MICRO, RUBY_DATE, STAMP,
                        STAMP_MICRO, UNIX_DATE)
from .logger import LoggerFactory
from .settings import Settings

__all__ = [
    "LoggerFactory",
    "Settings",
    "CONSTANTS",
    "GOST2016_NUMERIC",
    "GOST2016_WORD",
    "GOST2003_WORD",
    "GOST2003_NUMERIC_REVERSE",
    "LAYOUT",
    "ANSIC",
    "UNIX_DATE",
    "RUBY_DATE",
    "RFC822",
    "RFC822Z",
    "RFC850",
    "RFC1123",
    "RFC1123Z",
    "RFC3339",
    "RFC3339_MICRO",
    "KITCHEN",
    "STAMP",
    "STAMP_MICRO",
    "MONTHS_IN_YEAR",
    "DAYS_IN_WEEK",
]
