"""
Rendering Package

Example records -> gb4e interlinear markup.

Usage:
    from lingtex.rendering import render, apply_label

    markup = apply_label(render(examples, "list"), "ex:kara")
"""

from .latex import latex_escape, escape_plain, gloss_call_pattern
from .renderer import (
    InterlinearRenderer,
    OutputShape,
    RenderError,
    render,
    render_example_body,
    render_translation,
    apply_label,
    shapes_for,
    SINGLE_EXAMPLE_SHAPES,
    MULTI_EXAMPLE_SHAPES,
)

__all__ = [
    'latex_escape',
    'escape_plain',
    'gloss_call_pattern',
    'InterlinearRenderer',
    'OutputShape',
    'RenderError',
    'render',
    'render_example_body',
    'render_translation',
    'apply_label',
    'shapes_for',
    'SINGLE_EXAMPLE_SHAPES',
    'MULTI_EXAMPLE_SHAPES',
]
