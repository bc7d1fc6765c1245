from .patterns import (
    TOKEN_SPELLINGS,
    TOKEN_PATTERN,
    PORTABLE_DIRECTIVE,
    COMMENT_ROW,
)

__all__ = [
    "TOKEN_SPELLINGS",
    "TOKEN_PATTERN",
    "PORTABLE_DIRECTIVE",
    "COMMENT_ROW",
]
