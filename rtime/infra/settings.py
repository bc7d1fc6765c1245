"""
infra/settings.py

Runtime settings derived from environment variables.

Env controls:
- RTIME_TZ: zone name used for CLI input and "now" (default: local zone)
- RTIME_NAMES_FILE: optional CSV file with replacement name tables
"""

import os


class Settings:
    """Plain settings holder; build it with `Settings.from_env()`."""

    def __init__(self, tz_name=None, names_file=None):
        self.tz_name = tz_name
        self.names_file = names_file

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        tz_name = (env.get("RTIME_TZ") or "").strip() or None
        names_file = (env.get("RTIME_NAMES_FILE") or "").strip() or None
        return cls(tz_name=tz_name, names_file=names_file)
