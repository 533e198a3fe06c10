"""
Interlinear Pipeline Package

Complete TSV -> gb4e pipeline:
- Preprocessing (morpheme-break merging, grammatical-gloss wrapping)
- Parsing (tiered rows -> examples)
- Rendering (six markup shapes, label substitution)
"""

from .pipeline import (
    InterlinearPipeline,
    InterlinearResult,
    NO_EXAMPLES_MESSAGE,
    convert_tsv,
)

__all__ = [
    'InterlinearPipeline',
    'InterlinearResult',
    'NO_EXAMPLES_MESSAGE',
    'convert_tsv',
]
