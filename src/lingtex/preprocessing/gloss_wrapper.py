#!/usr/bin/env python3
"""
Grammatical-Gloss Wrapper

Marks grammatical abbreviations in the lexical-gloss tier so they can be
typeset differently (small caps via a `\\gl{}` macro) from lexical glosses:

    DET        ->  \\gl{det}
    1SG.EXCL   ->  \\gl{1sg}.\\gl{excl}
    chop.down  ->  chop.down          (lexical, left alone)

A segment is grammatical when it is all uppercase letters/digits, or when it
is listed in a custom gloss set. Only lex-gloss rows are touched, and this
step runs after morpheme-break merging so it sees the final merged tokens.

Usage:
    from lingtex.preprocessing import wrap_grammatical_glosses

    wrapped = wrap_grammatical_glosses(tsv, gloss_set={"Pl"})
"""

import re
from typing import AbstractSet, List, Optional
from logging import getLogger

from lingtex.utils import clean_text
from .rows import BREAK_MARKERS, data_start, is_free_label, row_label, split_rows

logger = getLogger(__name__)


GLOSS_MACRO = "gl"
GRAMMATICAL_RE = re.compile(r"^[A-Z0-9]+$")
SEGMENT_SPLIT_RE = re.compile("([" + re.escape(BREAK_MARKERS) + "])")


def is_lex_gloss_label(text: str) -> bool:
    return "lex" in text and "gloss" in text


def is_grammatical(segment: str, gloss_set: Optional[AbstractSet[str]] = None) -> bool:
    """True if a gloss segment is a grammatical abbreviation."""
    if not segment:
        return False
    if GRAMMATICAL_RE.match(segment):
        return True
    return bool(gloss_set) and segment in gloss_set


def gl(segment: str, macro: str = GLOSS_MACRO) -> str:
    """Macro-wrap one abbreviation: 'DET' -> '\\gl{det}'."""
    return f"\\{macro}{{{segment.lower()}}}"


def wrap_gloss_cell(
    value: str,
    gloss_set: Optional[AbstractSet[str]] = None,
    macro: str = GLOSS_MACRO,
) -> str:
    """
    Wrap every grammatical segment of one gloss cell.

    Separators (`=`, `.`, `-`) are kept as literal text between segments,
    so `1SG.EXCL` becomes two independently wrapped abbreviations.
    """
    if not value:
        return value
    parts = SEGMENT_SPLIT_RE.split(value)
    return "".join(gl(p, macro) if is_grammatical(p, gloss_set) else p for p in parts)


def wrap_row(
    row: str,
    gloss_set: Optional[AbstractSet[str]] = None,
    macro: str = GLOSS_MACRO,
) -> str:
    """Wrap the data cells of a lex-gloss row; any other row is returned as-is."""
    cells = row.split("\t")
    name = row_label(cells)
    if is_free_label(name) or not is_lex_gloss_label(name):
        return row

    start = data_start(cells)
    data: List[str] = [wrap_gloss_cell(clean_text(c), gloss_set, macro) for c in cells[start:]]
    return "\t".join(cells[:start] + data)


def wrap_grammatical_glosses(
    text: str,
    gloss_set: Optional[AbstractSet[str]] = None,
    macro: str = GLOSS_MACRO,
) -> str:
    """
    Wrap grammatical abbreviations on every lex-gloss row of raw TSV.

    Args:
        text: Raw TSV text (ideally already merged)
        gloss_set: Extra abbreviations treated as grammatical regardless of case
        macro: Macro name without backslash

    Returns:
        TSV text with `\\gl{...}` calls in the lex-gloss rows
    """
    if not text:
        return text

    rows = split_rows(text)
    wrapped = [wrap_row(row, gloss_set, macro) for row in rows]
    changed = sum(1 for before, after in zip(rows, wrapped) if before != after)
    logger.debug(f"Wrapped grammatical glosses on {changed} row(s)")
    return "\n".join(wrapped)
