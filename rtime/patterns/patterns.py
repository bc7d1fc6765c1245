#rtime\patterns\patterns.py

import re

from rtime.infra.constants import CONSTANTS

# ---------- Russian placeholder tokens ----------
TOKEN_SPELLINGS = (
    CONSTANTS.token_long_month,
    CONSTANTS.token_long_month_lower,
    CONSTANTS.token_month,
    CONSTANTS.token_month_lower,
    CONSTANTS.token_long_month_genitive,
    CONSTANTS.token_long_month_genitive_lower,
    CONSTANTS.token_long_weekday,
    CONSTANTS.token_long_weekday_lower,
    CONSTANTS.token_weekday,
    CONSTANTS.token_weekday_lower,
)

# Alternation is tried left to right, so longer spellings go first:
# "Января" and "Январь" must win over their "Янв" prefix.
TOKEN_PATTERN = re.compile(
    "|".join(re.escape(s) for s in sorted(TOKEN_SPELLINGS, key=len, reverse=True))
)

# ---------- Portable strftime directives ----------
# "%%" is matched too so an escaped percent never starts a directive.
PORTABLE_DIRECTIVE = re.compile(r"%(%|-[dmHIMSjy]|e|:z)")

# ---------- Names file ----------
COMMENT_ROW = re.compile(r"^\s*#")
