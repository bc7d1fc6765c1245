"""
rtime: Russian month and weekday names in date formatting.

Layouts are strftime layouts extended with Cyrillic placeholder tokens:
Январь, январь, Янв, янв, Января, января, Понедельник, понедельник, ПН, пн.

    t = rtime.date(2023, 3, 1)
    t.format(rtime.GOST2016_WORD)          # 1 марта 2023 г.
    t.format("ПН/%a, %-d Янв/%b %Y")       # СР/Wed, 1 Мар/Mar 2023
"""

from .core import (LayoutFormatter, LayoutScanner, RTime, StdFormatter, date,
                   now, ru_format, unix, unix_micro, unix_milli)
from .infra.constants import (ANSIC, GOST2003_NUMERIC_REVERSE, GOST2003_WORD,
                              GOST2016_NUMERIC, GOST2016_WORD, KITCHEN, LAYOUT,
                              RFC822, RFC822Z, RFC850, RFC1123, RFC1123Z,
                              RFC3339, RFC3339_MICRO, RUBY_DATE, STAMP,
                              STAMP_MICRO, UNIX_DATE)
from .pdio import NamesLoader
from .tables import (DEFAULT_TABLES, InvalidNamesList, NameTables,
                     TokenCategory, set_month_names, set_month_names_lower,
                     set_names, set_weekday_names, set_weekday_names_lower)

__all__ = [
    "RTime",
    "now",
    "date",
    "unix",
    "unix_milli",
    "unix_micro",
    "ru_format",
    "LayoutFormatter",
    "LayoutScanner",
    "StdFormatter",
    "NamesLoader",
    "NameTables",
    "TokenCategory",
    "DEFAULT_TABLES",
    "InvalidNamesList",
    "set_names",
    "set_month_names",
    "set_month_names_lower",
    "set_weekday_names",
    "set_weekday_names_lower",
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
]
