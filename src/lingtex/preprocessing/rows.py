"""
Raw TSV row helpers shared by the text-to-text preprocessors.

The preprocessors work on delimited text before parsing, so they need their
own notion of blocks, rows, tier labels and where a row's data cells start.
Both follow the parser: a block ends at a line that is blank once invisible
marks are removed, and the label sits in column 1 only when column 0 is
empty or a bare example number.
"""

import re
from typing import List

from lingtex.utils import clean_text, is_blank


BREAK_MARKERS = "=.-"
FREE_PREFIX = "free"

ROW_SPLIT_RE = re.compile(r"\r?\n")
NUMBER_RE = re.compile(r"^\d+$")


def split_rows(text: str) -> List[str]:
    return ROW_SPLIT_RE.split(text)


def split_blocks(text: str) -> List[str]:
    """
    Split raw text into blocks separated by runs of blank lines.

    A line holding only whitespace or directional marks counts as blank.
    """
    blocks: List[str] = []
    current: List[str] = []
    in_gap = False

    for row in split_rows(text):
        if is_blank(row):
            if not in_gap:
                blocks.append("\n".join(current))
                current = []
            in_gap = True
            continue
        current.append(row)
        in_gap = False

    blocks.append("\n".join(current))
    return blocks


def join_blocks(blocks: List[str]) -> str:
    return "\n\n".join(blocks)


def cell(cells: List[str], index: int) -> str:
    """Cell at index, or "" when the row is shorter."""
    return cells[index] if index < len(cells) else ""


def label(cells: List[str], index: int) -> str:
    """Lower-cased, cleaned content of one cell."""
    return clean_text(cell(cells, index)).lower()


def has_prefix_column(cells: List[str]) -> bool:
    """True when column 0 is empty or a bare example number."""
    first = clean_text(cell(cells, 0))
    return not first or NUMBER_RE.match(first) is not None


def row_label(cells: List[str]) -> str:
    """Tier label of a row: column 1 behind a prefix column, else column 0."""
    return label(cells, 1) if has_prefix_column(cells) else label(cells, 0)


def is_free_label(text: str) -> bool:
    return text.startswith(FREE_PREFIX)


def data_start(cells: List[str]) -> int:
    """Index of the first data cell of a tier row."""
    return 2 if has_prefix_column(cells) else 1
