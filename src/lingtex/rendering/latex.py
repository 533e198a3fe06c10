"""
LaTeX escaping for interlinear text.

Escapes `% $ # & _ { }` with a backslash and turns no-break spaces into
plain spaces. Gloss macro calls produced by the grammatical-gloss wrapper
(`\\gl{det}`) are left intact. `~` is kept as-is: in gb4e lines it is the
non-breaking space that holds a multi-word cell together.

Example:
    >>> latex_escape("50% & $5_{x}")
    '50\\\\% \\\\& \\\\$5\\\\_\\\\{x\\\\}'
"""

import re

from lingtex.preprocessing import GLOSS_MACRO
from lingtex.utils import normalize_spaces


LATEX_SPECIAL_RE = re.compile(r"([%$#&_{}])")


def gloss_call_pattern(macro: str = GLOSS_MACRO) -> "re.Pattern[str]":
    """Pattern matching one `\\<macro>{...}` call, captured whole."""
    return re.compile(r"(\\" + re.escape(macro) + r"\{[^}]+\})")


def escape_plain(text: str) -> str:
    """Escape LaTeX specials in text that contains no macro calls."""
    return LATEX_SPECIAL_RE.sub(r"\\\1", normalize_spaces(text))


def latex_escape(text: str, macro: str = GLOSS_MACRO) -> str:
    """
    Escape LaTeX specials while keeping `\\gl{...}` calls verbatim.

    The text is split around gloss calls; only the pieces between them are
    escaped. The split keeps calls at odd indices.
    """
    if not text:
        return text
    parts = gloss_call_pattern(macro).split(text)
    return "".join(part if i % 2 else escape_plain(part) for i, part in enumerate(parts))
