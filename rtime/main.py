#rtime\main.py
"""

CLI entrypoint:
- Takes a layout (argv[1]) and an optional timestamp (argv[2], default: now)
- Applies RTIME_NAMES_FILE name tables, if configured
- Prints the formatted timestamp
- Emits concise log messages and exit codes

Exit codes:
 0 = success
 1 = names file rejected (wrong table length)
 2 = input error (no layout, bad timestamp, unknown zone, missing file)

Example:
 rtime "%-d января %Y г., понедельник" 2023-03-01   ->  1 марта 2023 г., среда
"""

import sys

from rtime.core.formatter import LayoutFormatter
from rtime.core.timestamp import RTime, now
from rtime.infra.logger import LoggerFactory
from rtime.infra.settings import Settings
from rtime.pdio.loader import NamesLoader
from rtime.tables.exceptions import InvalidNamesList
from rtime.utils.timeparse import TimeParser

log = LoggerFactory.get_logger("rtime.main")


def _resolve_time(argv, zone):
    """Timestamp from argv[2] or the current time; error if unparsable."""
    if len(argv) >= 3:
        dt = TimeParser.to_dt(argv[2], zone)
        if dt is None:
            raise ValueError(f"Cannot parse timestamp: {argv[2]!r}")
        return RTime.wrap(dt)
    return now(zone)


def main(argv, out=None):
    out = out if out is not None else sys.stdout
    if len(argv) < 2 or not argv[1]:
        log.error("No layout provided. Usage: rtime LAYOUT [TIMESTAMP]")
        return 2

    settings = Settings.from_env()
    try:
        zone = TimeParser.resolve_zone(settings.tz_name) if settings.tz_name else None
        value = _resolve_time(argv, zone)
    except ValueError as e:
        log.error(str(e))
        return 2

    tables = None
    if settings.names_file:
        try:
            tables = NamesLoader(settings.names_file).load()
        except InvalidNamesList as e:
            log.error("Names file %s rejected: %s", settings.names_file, e)
            return 1
        except (OSError, ValueError) as e:
            log.error(str(e))
            return 2

    out.write(LayoutFormatter(tables).format(value, argv[1]) + "\n")
    return 0


def run():
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    run()
