#rtime\infra\constants.py

"""
infra/constants.py

Immutable project-wide constants in a frozen dataclass.
Provides a singleton `CONSTANTS` plus module-level re-exports.

Layouts are strftime layouts; the Russian ones mix strftime directives with
the Cyrillic placeholder tokens (Январь, янв, Понедельник, пн, ...).
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Constants:
    """Immutable container for shared constants (no imports, no side effects)."""

    # Russian date layouts (GOST R 7.0.97-2016 / GOST R 6.30-2003)
    gost2016_numeric = "%d.%m.%Y"
    gost2016_word = "%-d января %Y г."
    gost2003_word = "%d января %Y г."
    gost2003_numeric_reverse = "%Y.%m.%d"

    # Common reference layouts, strftime spelling
    layout = "%m/%d %I:%M:%S%p '%y %z"
    ansic = "%a %b %e %H:%M:%S %Y"
    unix_date = "%a %b %e %H:%M:%S %Z %Y"
    ruby_date = "%a %b %d %H:%M:%S %z %Y"
    rfc822 = "%d %b %y %H:%M %Z"
    rfc822z = "%d %b %y %H:%M %z"
    rfc850 = "%A, %d-%b-%y %H:%M:%S %Z"
    rfc1123 = "%a, %d %b %Y %H:%M:%S %Z"
    rfc1123z = "%a, %d %b %Y %H:%M:%S %z"
    rfc3339 = "%Y-%m-%dT%H:%M:%S%:z"
    rfc3339_micro = "%Y-%m-%dT%H:%M:%S.%f%:z"
    kitchen = "%-I:%M%p"
    stamp = "%b %e %H:%M:%S"
    stamp_micro = "%b %e %H:%M:%S.%f"

    # Built-in name tables, index 0 = January / Monday
    long_month_names = (
        "Январь", "Февраль", "Март", "Апрель", "Май", "Июнь",
        "Июль", "Август", "Сентябрь", "Октябрь", "Ноябрь", "Декабрь",
    )
    long_month_lower_names = (
        "январь", "февраль", "март", "апрель", "май", "июнь",
        "июль", "август", "сентябрь", "октябрь", "ноябрь", "декабрь",
    )
    month_names = (
        "Янв", "Фев", "Мар", "Апр", "Май", "Июнь",
        "Июль", "Авг", "Сен", "Окт", "Ноя", "Дек",
    )
    month_lower_names = (
        "янв", "фев", "мар", "апр", "май", "июнь",
        "июль", "авг", "сен", "окт", "ноя", "дек",
    )
    long_month_genitive_names = (
        "Января", "Февраля", "Марта", "Апреля", "Мая", "Июня",
        "Июля", "Августа", "Сентября", "Октября", "Ноября", "Декабря",
    )
    long_month_genitive_lower_names = (
        "января", "февраля", "марта", "апреля", "мая", "июня",
        "июля", "августа", "сентября", "октября", "ноября", "декабря",
    )
    long_weekday_names = (
        "Понедельник", "Вторник", "Среда", "Четверг",
        "Пятница", "Суббота", "Воскресенье",
    )
    long_weekday_lower_names = (
        "понедельник", "вторник", "среда", "четверг",
        "пятница", "суббота", "воскресенье",
    )
    weekday_names = ("ПН", "ВТ", "СР", "ЧТ", "ПТ", "СБ", "ВС")
    weekday_lower_names = ("пн", "вт", "ср", "чт", "пт", "сб", "вс")

    # Placeholder spellings recognised inside layouts
    token_long_month = "Январь"
    token_long_month_lower = "январь"
    token_month = "Янв"
    token_month_lower = "янв"
    token_long_month_genitive = "Января"
    token_long_month_genitive_lower = "января"
    token_long_weekday = "Понедельник"
    token_long_weekday_lower = "понедельник"
    token_weekday = "ПН"
    token_weekday_lower = "пн"

    months_in_year = 12
    days_in_week = 7


# Singleton instance
CONSTANTS = Constants()

# Convenience re-exports
GOST2016_NUMERIC = CONSTANTS.gost2016_numeric
GOST2016_WORD = CONSTANTS.gost2016_word
GOST2003_WORD = CONSTANTS.gost2003_word
GOST2003_NUMERIC_REVERSE = CONSTANTS.gost2003_numeric_reverse

LAYOUT = CONSTANTS.layout
ANSIC = CONSTANTS.ansic
UNIX_DATE = CONSTANTS.unix_date
RUBY_DATE = CONSTANTS.ruby_date
RFC822 = CONSTANTS.rfc822
RFC822Z = CONSTANTS.rfc822z
RFC850 = CONSTANTS.rfc850
RFC1123 = CONSTANTS.rfc1123
RFC1123Z = CONSTANTS.rfc1123z
RFC3339 = CONSTANTS.rfc3339
RFC3339_MICRO = CONSTANTS.rfc3339_micro
KITCHEN = CONSTANTS.kitchen
STAMP = CONSTANTS.stamp
STAMP_MICRO = CONSTANTS.stamp_micro

MONTHS_IN_YEAR = CONSTANTS.months_in_year
DAYS_IN_WEEK = CONSTANTS.days_in_week
