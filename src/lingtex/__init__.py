"""
LingTeX Interlinear

Converts tiered TSV exports of glossed linguistic examples into gb4e
interlinear markup:
- Preprocessing (morpheme-break merging, grammatical-gloss wrapping)
- Parsing (tiered rows -> examples)
- Rendering (six markup shapes, label substitution)
"""

from lingtex.config import InterlinearConfig, ConfigError
from lingtex.parsing import Example, FreeTranslation, parse_examples
from lingtex.pipeline import InterlinearPipeline, InterlinearResult, NO_EXAMPLES_MESSAGE, convert_tsv
from lingtex.rendering import OutputShape, RenderError, render, apply_label

__version__ = "0.1.0"

__all__ = [
    'InterlinearConfig',
    'ConfigError',
    'Example',
    'FreeTranslation',
    'parse_examples',
    'InterlinearPipeline',
    'InterlinearResult',
    'NO_EXAMPLES_MESSAGE',
    'convert_tsv',
    'OutputShape',
    'RenderError',
    'render',
    'apply_label',
]
