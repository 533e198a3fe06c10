"""
Copy/Paste Text Cleanup Utility

Text copied out of FLEx, Word or a spreadsheet often carries characters that
are invisible on screen but break tab-delimited parsing and LaTeX output:

    U+200E  LEFT-TO-RIGHT MARK
    U+200F  RIGHT-TO-LEFT MARK
    U+202A..U+202E  directional embedding / override controls
    U+00A0  NO-BREAK SPACE

Example:
    >>> strip_invisible("\\u200eFree \\u200eAt the river")
    'Free At the river'
"""

import re


NO_BREAK_SPACE = '\u00a0'

INVISIBLE_MARKS = {
    '\u200e',  # LRM
    '\u200f',  # RLM
    '\u202a',  # LRE
    '\u202b',  # RLE
    '\u202c',  # PDF
    '\u202d',  # LRO
    '\u202e',  # RLO
}

_INVISIBLE_RE = re.compile('[' + ''.join(sorted(INVISIBLE_MARKS)) + ']')


def strip_invisible(text: str) -> str:
    """
    Remove directional and embedding marks from text.

    Args:
        text: Raw text, possibly pasted from a right-to-left aware editor

    Returns:
        Text without LRM/RLM and U+202A-U+202E controls
    """
    if not text:
        return text
    return _INVISIBLE_RE.sub('', text)


def normalize_spaces(text: str) -> str:
    """Replace no-break spaces with ordinary spaces."""
    if not text:
        return text
    return text.replace(NO_BREAK_SPACE, ' ')


def clean_text(text: str) -> str:
    """
    Strip invisible marks, normalize no-break spaces and trim.

    Example:
        >>> clean_text("  pa\\u00a0sɛn \\u200f")
        'pa sɛn'
    """
    return normalize_spaces(strip_invisible(text)).strip()


def is_blank(text: str) -> bool:
    """True if the text is empty once invisible marks and whitespace are gone."""
    return not clean_text(text or '')


def has_invisible_marks(text: str) -> bool:
    """Check if text contains any directional/embedding marks."""
    if not text:
        return False
    return _INVISIBLE_RE.search(text) is not None
