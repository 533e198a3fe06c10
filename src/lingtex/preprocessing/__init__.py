"""
Preprocessing Package

Text-to-text transforms applied to raw TSV before parsing, always in this
order:
1. merge_morpheme_breaks - re-join clitic/affix fragments
2. wrap_grammatical_glosses - mark grammatical abbreviations with \\gl{}
"""

from .morpheme_breaks import merge_morpheme_breaks, merge_block, merge_token_pairs
from .gloss_wrapper import (
    wrap_grammatical_glosses,
    wrap_gloss_cell,
    is_grammatical,
    GLOSS_MACRO,
)

__all__ = [
    'merge_morpheme_breaks',
    'merge_block',
    'merge_token_pairs',
    'wrap_grammatical_glosses',
    'wrap_gloss_cell',
    'is_grammatical',
    'GLOSS_MACRO',
]
