"""
Utils Package

Text cleanup helpers shared by the tokenizer, parser and preprocessors.
"""

from .text_cleanup import (
    strip_invisible,
    normalize_spaces,
    clean_text,
    is_blank,
    has_invisible_marks,
    INVISIBLE_MARKS,
    NO_BREAK_SPACE,
)

__all__ = [
    'strip_invisible',
    'normalize_spaces',
    'clean_text',
    'is_blank',
    'has_invisible_marks',
    'INVISIBLE_MARKS',
    'NO_BREAK_SPACE',
]
