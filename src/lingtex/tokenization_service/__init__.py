#!/usr/bin/env python3
"""
Tokenization Service Package

Normalizes raw tab-separated lines into clean cell values.

Usage:
    from lingtex.tokenization_service import tokenize_tsv_line

    cells = tokenize_tsv_line("Morphemes\\tpa sɛn\\tɛɾi")
"""

from .tokenizer import (
    tokenize_tsv_line,
    normalize_cell,
    is_empty_cell,
    EMPTY_CELL,
    CELL_SEPARATOR,
)

__all__ = [
    "tokenize_tsv_line",
    "normalize_cell",
    "is_empty_cell",
    "EMPTY_CELL",
    "CELL_SEPARATOR",
]
