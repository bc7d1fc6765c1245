"""
tables/tables.py

Russian month and weekday name tables.

Encapsulates:
- The ten token categories (long/short, upper/lower, genitive months)
- All-or-nothing table replacement with length validation
- 1-based lookup with a visible placeholder for out-of-range indices

A single process-wide `DEFAULT_TABLES` instance backs formatting when no
tables are passed explicitly. Replace its tables during start-up, before any
concurrent formatting begins; the object does no locking of its own.
"""

from enum import IntEnum

from rtime.infra.constants import CONSTANTS, DAYS_IN_WEEK, MONTHS_IN_YEAR
from rtime.infra.logger import LoggerFactory
from rtime.tables.exceptions import InvalidNamesList
from rtime.utils.textutils import TextTools

log = LoggerFactory.get_logger("rtime.tables")


class TokenCategory(IntEnum):
    LONG_MONTH = 1                  # Январь
    LONG_MONTH_LOWER = 2            # январь
    MONTH = 3                       # Янв
    MONTH_LOWER = 4                 # янв
    LONG_MONTH_GENITIVE = 5         # Января
    LONG_MONTH_GENITIVE_LOWER = 6   # января
    LONG_WEEKDAY = 7                # Понедельник
    LONG_WEEKDAY_LOWER = 8          # понедельник
    WEEKDAY = 9                     # ПН
    WEEKDAY_LOWER = 10              # пн

    @property
    def is_month(self):
        return self <= TokenCategory.LONG_MONTH_GENITIVE_LOWER

    @property
    def arity(self):
        return MONTHS_IN_YEAR if self.is_month else DAYS_IN_WEEK


_BUILTIN_NAMES = {
    TokenCategory.LONG_MONTH: CONSTANTS.long_month_names,
    TokenCategory.LONG_MONTH_LOWER: CONSTANTS.long_month_lower_names,
    TokenCategory.MONTH: CONSTANTS.month_names,
    TokenCategory.MONTH_LOWER: CONSTANTS.month_lower_names,
    TokenCategory.LONG_MONTH_GENITIVE: CONSTANTS.long_month_genitive_names,
    TokenCategory.LONG_MONTH_GENITIVE_LOWER: CONSTANTS.long_month_genitive_lower_names,
    TokenCategory.LONG_WEEKDAY: CONSTANTS.long_weekday_names,
    TokenCategory.LONG_WEEKDAY_LOWER: CONSTANTS.long_weekday_lower_names,
    TokenCategory.WEEKDAY: CONSTANTS.weekday_names,
    TokenCategory.WEEKDAY_LOWER: CONSTANTS.weekday_lower_names,
}


# Layout spelling -> category
TOKEN_CATEGORIES = {
    CONSTANTS.token_long_month: TokenCategory.LONG_MONTH,
    CONSTANTS.token_long_month_lower: TokenCategory.LONG_MONTH_LOWER,
    CONSTANTS.token_month: TokenCategory.MONTH,
    CONSTANTS.token_month_lower: TokenCategory.MONTH_LOWER,
    CONSTANTS.token_long_month_genitive: TokenCategory.LONG_MONTH_GENITIVE,
    CONSTANTS.token_long_month_genitive_lower: TokenCategory.LONG_MONTH_GENITIVE_LOWER,
    CONSTANTS.token_long_weekday: TokenCategory.LONG_WEEKDAY,
    CONSTANTS.token_long_weekday_lower: TokenCategory.LONG_WEEKDAY_LOWER,
    CONSTANTS.token_weekday: TokenCategory.WEEKDAY,
    CONSTANTS.token_weekday_lower: TokenCategory.WEEKDAY_LOWER,
}


class NameTables:
    """
    Stateful container of the ten name tables.

    Every table starts with the built-in Russian names. Tables are replaced
    whole through `set_names` (or one of the four short-name setters); a
    replacement of the wrong length raises `InvalidNamesList` and keeps the
    previous table.
    """

    def __init__(self):
        self._tables = dict(_BUILTIN_NAMES)

    def __repr__(self):
        return f"<NameTables months={self._tables[TokenCategory.LONG_MONTH][0]!r}...>"

    def names(self, category):
        """Return the current table for `category` as a tuple."""
        return self._tables[TokenCategory(category)]

    def set_names(self, category, names):
        """Replace the table for `category`; the length must match exactly."""
        category = TokenCategory(category)
        new_names = TextTools.to_names(names)
        if len(new_names) != category.arity:
            log.warning(
                "Rejected %s table: expected %d names, got %d",
                category.name, category.arity, len(new_names),
            )
            raise InvalidNamesList(category.name, category.arity, len(new_names))
        self._tables[category] = new_names
        log.debug("Replaced %s table: %s", category.name, ", ".join(new_names))

    # ----- Short-name setters -----
    def set_month_names(self, names):
        """Set short month names (Янв, Фев, etc.)."""
        self.set_names(TokenCategory.MONTH, names)

    def set_month_names_lower(self, names):
        """Set short lowercase month names (янв, фев, etc.)."""
        self.set_names(TokenCategory.MONTH_LOWER, names)

    def set_weekday_names(self, names):
        """Set short weekday names (ПН, ВТ, etc.)."""
        self.set_names(TokenCategory.WEEKDAY, names)

    def set_weekday_names_lower(self, names):
        """Set short lowercase weekday names (пн, вт, etc.)."""
        self.set_names(TokenCategory.WEEKDAY_LOWER, names)

    # ----- Lookup -----
    def name_for(self, category, index):
        """
        Return the name for a 1-based month (1-12) or weekday (1-7, Monday
        first). Out-of-range input yields "Month(n)" / "Day(n)" instead of
        failing the whole format call.
        """
        category = TokenCategory(category)
        if 1 <= index <= category.arity:
            return self._tables[category][index - 1]
        placeholder = f"Month({index})" if category.is_month else f"Day({index})"
        log.warning("No %s name for index %r, using %s", category.name, index, placeholder)
        return placeholder

    def copy(self):
        other = NameTables()
        other._tables = dict(self._tables)
        return other


DEFAULT_TABLES = NameTables()


def set_names(category, names):
    DEFAULT_TABLES.set_names(category, names)


def set_month_names(names):
    DEFAULT_TABLES.set_month_names(names)


def set_month_names_lower(names):
    DEFAULT_TABLES.set_month_names_lower(names)


def set_weekday_names(names):
    DEFAULT_TABLES.set_weekday_names(names)


def set_weekday_names_lower(names):
    DEFAULT_TABLES.set_weekday_names_lower(names)
