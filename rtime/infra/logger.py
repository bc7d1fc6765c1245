#rtime\infra\logger.py
"""
infra/logger.py

Logging for the rtime package.

Handlers live on the package logger "rtime" only; module loggers
("rtime.tables", "rtime.core.formatter", ...) are its children and
propagate to it, so each record is written once.

Env controls (read when the package logger is first configured):
- RTIME_LOGLEVEL: level name or number (default: INFO)
- RTIME_LOGFILE: optional log file path, appended to in UTF-8
"""

import logging
import os
import sys

PACKAGE_LOGGER = "rtime"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def _level_from_env(value):
    value = (value or "").strip().upper()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value) if value else logging.INFO
    return level if isinstance(level, int) else logging.INFO


class LoggerFactory:
    """
    Hands out loggers under the "rtime" namespace.

    Usage:
        from rtime.infra import LoggerFactory
        log = LoggerFactory.get_logger("rtime.tables")
    """

    _configured = False

    @classmethod
    def configure(cls, environ=None):
        """(Re)attach the stderr and optional file handler to the package logger."""
        env = os.environ if environ is None else environ
        package = logging.getLogger(PACKAGE_LOGGER)
        for handler in list(package.handlers):
            package.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(LOG_FORMAT)
        stream = logging.StreamHandler(sys.stderr)
        stream.setFormatter(formatter)
        package.addHandler(stream)
        package.setLevel(_level_from_env(env.get("RTIME_LOGLEVEL")))

        logfile = (env.get("RTIME_LOGFILE") or "").strip()
        if logfile:
            try:
                filehandler = logging.FileHandler(logfile, mode="a", encoding="utf-8")
            except OSError as e:
                package.error("Cannot open log file %s: %s", logfile, e)
            else:
                filehandler.setFormatter(formatter)
                package.addHandler(filehandler)

        cls._configured = True
        return package

    @classmethod
    def get_logger(cls, name):
        if not cls._configured:
            cls.configure()
        if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
            name = f"{PACKAGE_LOGGER}.{name}"
        return logging.getLogger(name)
