"""
core/formatter.py

LayoutFormatter: the central engine that:
- Scans a layout left to right for Russian placeholder tokens
- Resolves each token against the name tables for the value's month/weekday
- Leaves literal text and strftime directives untouched
- Hands the rewritten layout to the standard formatter

Tokens: Январь, январь, Янв, янв, Января, января, Понедельник, понедельник,
ПН, пн. At any position the longest spelling wins ("Января" over "Янв").
There is no escape syntax; literal text that spells a token is replaced.
"""

from rtime.core.stdformat import StdFormatter
from rtime.infra.logger import LoggerFactory
from rtime.patterns.patterns import TOKEN_PATTERN
from rtime.tables.tables import DEFAULT_TABLES, TOKEN_CATEGORIES
from rtime.utils.textutils import TextTools

log = LoggerFactory.get_logger("rtime.core.formatter")


class LayoutScanner:
    """Splits a layout into (literal prefix, token category) chunks."""

    @staticmethod
    def chunks(layout):
        """
        Yield (prefix, category) pairs in layout order.
        The last pair holds the trailing literal text and category None.
        """
        pos = 0
        for m in TOKEN_PATTERN.finditer(layout):
            yield layout[pos:m.start()], TOKEN_CATEGORIES[m.group(0)]
            pos = m.end()
        yield layout[pos:], None


class LayoutFormatter:
    """Formats date/datetime values with layouts mixing Russian tokens and strftime."""

    def __init__(self, tables=None):
        self.tables = tables if tables is not None else DEFAULT_TABLES

    def rewrite(self, layout, month, weekday):
        """
        Replace every Russian token in `layout` with its localized name.
        `month` is 1-12, `weekday` is 1-7 with Monday = 1.
        The result is still a strftime layout.
        """
        out = []
        for prefix, category in LayoutScanner.chunks(layout):
            out.append(prefix)
            if category is None:
                break
            index = month if category.is_month else weekday
            name = self.tables.name_for(category, index)
            out.append(TextTools.escape_percent(name))
        return "".join(out)

    def format(self, value, layout):
        """Return `value` formatted with `layout`."""
        # isoweekday() is already Monday-first, Sunday = 7
        rewritten = self.rewrite(layout, value.month, value.isoweekday())
        if rewritten != layout:
            log.debug("Rewrote layout %r -> %r", layout, rewritten)
        return StdFormatter.strftime(value, rewritten)


def ru_format(value, layout, tables=None):
    """Format any date/datetime `value` with a Russian-aware `layout`."""
    return LayoutFormatter(tables).format(value, layout)
