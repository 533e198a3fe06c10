#!/usr/bin/env python3
"""
TSV Cell Tokenizer

Turns one tab-delimited line into cell values that are safe to use as
space-delimited gb4e arguments:

- Invisible directional marks are removed
- No-break spaces count as ordinary spaces
- Surrounding whitespace is trimmed
- An empty cell becomes the placeholder "~" so no aligned slot is ever empty
- Interior spaces become "~", keeping a multi-word gloss in one column

Usage:
    from lingtex.tokenization_service import tokenize_tsv_line

    tokenize_tsv_line("Word Gloss\\tMr. Seth\\t\\tyou")
    # ['Word~Gloss', 'Mr.~Seth', '~', 'you']
"""

from typing import List

from lingtex.utils import clean_text


EMPTY_CELL = '~'
CELL_SEPARATOR = '\t'


def normalize_cell(cell: str) -> str:
    """
    Normalize a single TSV cell.

    Args:
        cell: Raw cell text

    Returns:
        "~" for an empty cell, otherwise the trimmed text with spaces as "~"
    """
    cleaned = clean_text(cell or '')
    if not cleaned:
        return EMPTY_CELL
    return cleaned.replace(' ', EMPTY_CELL)


def tokenize_tsv_line(line: str) -> List[str]:
    """
    Split a line on tabs and normalize every cell.

    Never fails: an empty line yields a single placeholder cell.
    """
    return [normalize_cell(cell) for cell in line.split(CELL_SEPARATOR)]


def is_empty_cell(cell: str) -> bool:
    """True for a missing cell or the empty-cell placeholder."""
    return not cell or cell == EMPTY_CELL
