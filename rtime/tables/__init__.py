from .exceptions import InvalidNamesList
from .tables import (
    DEFAULT_TABLES,
    NameTables,
    TokenCategory,
    TOKEN_CATEGORIES,
    set_month_names,
    set_month_names_lower,
    set_names,
    set_weekday_names,
    set_weekday_names_lower,
)

__all__ = [
    "InvalidNamesList",
    "DEFAULT_TABLES",
    "NameTables",
    "TokenCategory",
    "TOKEN_CATEGORIES",
    "set_names",
    "set_month_names",
    "set_month_names_lower",
    "set_weekday_names",
    "set_weekday_names_lower",
]
