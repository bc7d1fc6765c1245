"""
pdio/loader.py
CSV loader for replacement name tables.

File format (UTF-8, one table per row):
    month,Янв.,Фев.,Мар.,Апр.,Май,Июн.,Июл.,Авг.,Сен.,Окт.,Ноя.,Дек.
    # comment rows are skipped
    weekday_lower,пон,вто,сре,чет,пят,суб,вос

Responsibilities:
- Read rows keyed by token category name (case-insensitive)
- Validate every row before touching any table
- Apply the rows to a NameTables instance
"""

import csv
from pathlib import Path

from rtime.infra.logger import LoggerFactory
from rtime.patterns.patterns import COMMENT_ROW
from rtime.tables.exceptions import InvalidNamesList
from rtime.tables.tables import DEFAULT_TABLES, TokenCategory
from rtime.utils.textutils import TextTools

log = LoggerFactory.get_logger("rtime.pdio.loader")


class NamesLoader:
    """Loads name tables from a CSV file."""

    def __init__(self, path):
        self.path = Path(path)

    def read(self):
        """Return a list of (TokenCategory, names) pairs, validated."""
        rows = []
        with self.path.open(newline="", encoding="utf-8") as f:
            for lineno, row in enumerate(csv.reader(f), start=1):
                if not row or not "".join(row).strip():
                    continue
                if COMMENT_ROW.match(row[0]):
                    continue
                key = row[0].strip().upper()
                try:
                    category = TokenCategory[key]
                except KeyError:
                    raise ValueError(f"{self.path}:{lineno}: unknown name table {row[0]!r}") from None
                names = TextTools.clean_cells(row[1:])
                if len(names) != category.arity:
                    raise InvalidNamesList(category.name, category.arity, len(names))
                rows.append((category, names))
        return rows

    def load(self, tables=None):
        """
        Apply the file to `tables` (a fresh copy of the defaults when None)
        and return it. Nothing is replaced if any row is invalid.
        """
        rows = self.read()
        target = tables if tables is not None else DEFAULT_TABLES.copy()
        for category, names in rows:
            target.set_names(category, names)
        log.debug("Loaded %d name table(s) from %s", len(rows), self.path)
        return target
