#!/usr/bin/env python3
"""
Morpheme-Break Merging Preprocessor

FLEx exports put a bound clitic or affix in its own cell with a leading or
trailing break marker (`=`, `.`, `-`). This step glues such fragments back
onto the neighbouring free token, on the morpheme tier and on its aligned
lexical-gloss tier, so one aligned column is one orthographic word:

    Morphemes   kaɾa  =tɛ  =hi         uː        ->  kaɾa=tɛ=hi         uː
    Lex. Gloss  Kara  LOC  EXST.CMP    tree      ->  Kara=LOC=EXST.CMP  tree

Blocks without both a morpheme row and a lex row are returned unchanged.

Usage:
    from lingtex.preprocessing import merge_morpheme_breaks

    merged_tsv = merge_morpheme_breaks(raw_tsv)
"""

import re
from typing import List, Optional, Tuple
from logging import getLogger

from lingtex.utils import clean_text
from .rows import (
    BREAK_MARKERS,
    data_start,
    join_blocks,
    is_free_label,
    row_label,
    split_blocks,
    split_rows,
)

logger = getLogger(__name__)


_MARKER_CLASS = "[" + re.escape(BREAK_MARKERS) + "]+"
LEADING_BREAK_RE = re.compile("^(" + _MARKER_CLASS + ")")
TRAILING_BREAK_RE = re.compile("(" + _MARKER_CLASS + ")$")


def is_morpheme_label(text: str) -> bool:
    return text.startswith("morpheme")


def is_lex_label(text: str) -> bool:
    return text.startswith("lex")


def find_tier_rows(cells: List[List[str]]) -> Tuple[Optional[int], Optional[int]]:
    """
    Locate the morpheme row and the lex row of a block.

    The label is column 1 when column 0 is empty or a number, else column 0.
    Free lines are never tier rows; the last matching row wins.
    """
    morpheme_row = None
    lex_row = None
    for i, row in enumerate(cells):
        name = row_label(row)
        if is_free_label(name):
            continue
        if is_morpheme_label(name):
            morpheme_row = i
        if is_lex_label(name):
            lex_row = i
    return morpheme_row, lex_row


def merge_token_pairs(morphemes: List[str], glosses: List[str]) -> Tuple[List[str], List[str]]:
    """
    Merge marker-split morpheme tokens and their glosses.

    Args:
        morphemes: Morpheme tier tokens
        glosses: Lexical gloss tokens aligned with `morphemes`

    Returns:
        (merged morphemes, merged glosses), always of equal length
    """
    width = max(len(morphemes), len(glosses))
    m_tokens = list(morphemes) + [""] * (width - len(morphemes))
    l_tokens = list(glosses) + [""] * (width - len(glosses))

    merged_m: List[str] = []
    merged_l: List[str] = []

    i = 0
    while i < width:
        cur_m = m_tokens[i]
        cur_l = l_tokens[i]

        if not cur_m and not cur_l:
            merged_m.append("")
            merged_l.append("")
            i += 1
            continue

        lead = LEADING_BREAK_RE.match(cur_m)
        trail = TRAILING_BREAK_RE.search(cur_m)

        if lead and trail and lead.end() < len(cur_m):
            # Infix-like token: no agreed merge order, the leading rule wins
            logger.warning(
                f"Morpheme '{cur_m}' has both leading and trailing break markers; "
                f"attaching it to the {'previous' if merged_m else 'next'} token"
            )

        if lead and merged_m:
            merged_m[-1] += cur_m
            merged_l[-1] += lead.group(1) + cur_l
            i += 1
            continue

        if trail and i + 1 < width:
            merged_m.append(cur_m + m_tokens[i + 1])
            merged_l.append(cur_l + trail.group(1) + l_tokens[i + 1])
            i += 2
            continue

        merged_m.append(cur_m)
        merged_l.append(cur_l)
        i += 1

    return merged_m, merged_l


def merge_block(block: str) -> str:
    """Merge break-marked fragments within one blank-line-delimited block."""
    rows = [r for r in split_rows(block) if r.strip()]
    if not rows:
        return block

    cells = [r.split("\t") for r in rows]
    morpheme_row, lex_row = find_tier_rows(cells)
    if morpheme_row is None or lex_row is None:
        logger.debug("Block has no morpheme/lex tier pair, leaving it unchanged")
        return block

    m_start = data_start(cells[morpheme_row])
    l_start = data_start(cells[lex_row])
    m_tokens = [clean_text(c) for c in cells[morpheme_row][m_start:]]
    l_tokens = [clean_text(c) for c in cells[lex_row][l_start:]]

    merged_m, merged_l = merge_token_pairs(m_tokens, l_tokens)
    logger.debug(f"Merged {max(len(m_tokens), len(l_tokens))} morpheme slot(s) into {len(merged_m)}")

    out_rows = []
    for idx, row in enumerate(cells):
        if idx == morpheme_row:
            out_rows.append("\t".join(row[:m_start] + merged_m))
        elif idx == lex_row:
            out_rows.append("\t".join(row[:l_start] + merged_l))
        else:
            out_rows.append(rows[idx])
    return "\n".join(out_rows)


def merge_morpheme_breaks(text: str) -> str:
    """
    Re-join clitic/affix fragments on the morpheme and lex-gloss tiers.

    Args:
        text: Raw TSV text, blocks separated by blank lines

    Returns:
        Reconstructed TSV text, blocks rejoined with blank lines
    """
    if not text:
        return text
    return join_blocks([merge_block(block) for block in split_blocks(text)])

