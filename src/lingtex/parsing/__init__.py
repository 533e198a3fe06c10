"""
Parsing Package

Tiered TSV -> Example records.

Usage:
    from lingtex.parsing import parse_examples

    examples = parse_examples(tsv_text)
"""

from .types import Example, FreeTranslation, ExampleBuilder, DEFAULT_TIER
from .example_parser import ExampleParser, parse_examples

__all__ = [
    "Example",
    "FreeTranslation",
    "ExampleBuilder",
    "DEFAULT_TIER",
    "ExampleParser",
    "parse_examples",
]
