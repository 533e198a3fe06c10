#!/usr/bin/env python3
"""
Tier Aligner / Line Selector

Decides which tiers of an Example become aligned gb4e lines, in what order,
and which `\\gl...l` macro typesets them.

Order:
1. Canonical tiers, when present: Word, Morphemes, Lex. Gloss, Word Gloss,
   Word Cat., POS (case-insensitive)
2. Every other tier in encounter order, except Free* tiers

Tiers whose tokens are all blank are skipped. The number of lines is capped
by `max_aligned_lines` (never below 2), and the macro name is "g" followed
by one "l" per line: gll, glll, gllll, ...

Usage:
    from lingtex.alignment import select_aligned_lines

    aligned = select_aligned_lines(example, max_aligned_lines=3)
    print(aligned.macro, aligned.lines)
"""

from typing import List
from logging import getLogger

from pydantic import BaseModel, Field

from lingtex.parsing import Example

logger = getLogger(__name__)


CANONICAL_TIER_ORDER = ['word', 'morphemes', 'lex. gloss', 'word gloss', 'word cat.', 'pos']
DEFAULT_MAX_ALIGNED_LINES = 5
MIN_ALIGNED_LINES = 2


class AlignedLines(BaseModel):
    """Aligned lines chosen for one example plus the macro that typesets them."""

    macro: str = Field(
        ...,
        description="gb4e alignment macro name without backslash",
        examples=["gll", "glll"],
    )

    lines: List[str] = Field(
        default_factory=list,
        description="Space-joined token lines, first line goes on the macro itself",
    )

    available: int = Field(
        default=0,
        ge=0,
        description="Number of non-blank tiers before the cap was applied",
    )

    @property
    def count(self) -> int:
        return len(self.macro) - 1


def order_tiers(example: Example) -> List[str]:
    """
    Tier names of an example in rendering order.

    Names are compared lower-cased; duplicates by normalized name are dropped.
    """
    ordered: List[str] = []
    seen = set()

    for canonical in CANONICAL_TIER_ORDER:
        match = next((t for t in example.tier_order if t.lower() == canonical), None)
        if match is not None and match.lower() not in seen:
            ordered.append(match)
            seen.add(match.lower())

    for name in example.tier_order:
        lower = name.lower()
        if lower.startswith('free') or lower in seen:
            continue
        ordered.append(name)
        seen.add(lower)

    return ordered


def gather_aligned_lines(example: Example) -> List[str]:
    """
    All renderable aligned lines of an example, uncapped.

    Tokens are joined with a single space; spaces inside a cell were already
    turned into "~" by the tokenizer.
    """
    lines = []
    for name in order_tiers(example):
        tokens = example.tiers.get(name) or []
        if not any((t or '').strip() for t in tokens):
            continue
        lines.append(' '.join(tokens))
    return lines


def aligned_line_count(available: int, max_aligned_lines: int = DEFAULT_MAX_ALIGNED_LINES) -> int:
    """count = max(2, min(available, max(2, max_aligned_lines)))"""
    cap = max(MIN_ALIGNED_LINES, max_aligned_lines)
    return max(MIN_ALIGNED_LINES, min(available, cap))


def select_aligned_lines(example: Example, max_aligned_lines: int = DEFAULT_MAX_ALIGNED_LINES) -> AlignedLines:
    """
    Cap the aligned lines of an example and pick the alignment macro.

    Args:
        example: Parsed example
        max_aligned_lines: Configured maximum (values below 2 act as 2)

    Returns:
        AlignedLines with at most `count` lines and macro "g" + "l" * count
    """
    lines = gather_aligned_lines(example)
    count = aligned_line_count(len(lines), max_aligned_lines)
    if len(lines) > count:
        logger.debug(f"Dropping {len(lines) - count} aligned line(s) above the cap of {count}")
    return AlignedLines(macro='g' + 'l' * count, lines=lines[:count], available=len(lines))
