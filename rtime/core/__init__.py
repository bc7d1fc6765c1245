from .formatter import LayoutFormatter, LayoutScanner, ru_format
from .stdformat import StdFormatter
from .timestamp import RTime, date, now, unix, unix_micro, unix_milli

__all__ = [
    "LayoutFormatter",
    "LayoutScanner",
    "ru_format",
    "StdFormatter",
    "RTime",
    "now",
    "date",
    "unix",
    "unix_milli",
    "unix_micro",
]
