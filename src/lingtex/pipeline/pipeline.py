#!/usr/bin/env python3
"""
TSV -> Interlinear Pipeline

Complete conversion of tiered TSV into gb4e markup:
1. Morpheme-break merging (optional) - re-join clitic/affix fragments
2. Grammatical-gloss wrapping (optional) - \\gl{} around abbreviations
3. Parsing - tiered rows -> Example records
4. Rendering - aligned lines + translation in the requested shape
5. Labelling - placeholders -> \\label{...} (when a key is given)

Usage:
    from lingtex.pipeline import InterlinearPipeline

    pipeline = InterlinearPipeline()
    result = pipeline.process(tsv_text, shape="list", label="ex:kara")

    if result.has_examples:
        print(result.markup)
    else:
        print(result.message)
"""

from typing import Any, List, Optional, Union
from logging import getLogger

from pydantic import BaseModel, Field

from lingtex.alignment import select_aligned_lines
from lingtex.config import InterlinearConfig
from lingtex.parsing import Example, ExampleParser
from lingtex.preprocessing import merge_morpheme_breaks, wrap_grammatical_glosses
from lingtex.rendering import InterlinearRenderer, OutputShape, apply_label, shapes_for

logger = getLogger(__name__)


NO_EXAMPLES_MESSAGE = (
    'No examples found. Ensure TSV tiers like "Morphemes", "Lex. Gloss", '
    '"Word Gloss", and a "Free" line.'
)


class InterlinearResult(BaseModel):
    """Outcome of one conversion: parsed examples, markup and statistics."""

    examples: List[Example] = Field(
        default_factory=list,
        description="Parsed examples in source order",
    )

    shape: Optional[OutputShape] = Field(
        default=None,
        description="Shape the markup was rendered in, None when nothing was rendered",
    )

    markup: Optional[str] = Field(
        default=None,
        description="gb4e markup, None when no examples were found",
    )

    message: Optional[str] = Field(
        default=None,
        description="User-facing message for an empty result",
    )

    aligned_line_counts: List[int] = Field(
        default_factory=list,
        description="Aligned lines rendered per example (after the cap)",
    )

    @property
    def has_examples(self) -> bool:
        return bool(self.examples)

    @property
    def example_count(self) -> int:
        return len(self.examples)


class InterlinearPipeline:
    """
    TSV -> gb4e conversion with one read-only configuration.

    Example:
        pipeline = InterlinearPipeline(InterlinearConfig(wrap_grammatical_glosses=True))
        examples = pipeline.parse(tsv_text)
        markup = pipeline.render(examples, OutputShape.SINGLE)
    """

    def __init__(self, config: Optional[InterlinearConfig] = None):
        self.config = config or InterlinearConfig()
        self.parser = ExampleParser()
        self.renderer = InterlinearRenderer(self.config)

    def preprocess(self, text: str) -> str:
        """Apply the enabled text transforms: merge first, then wrap."""
        if self.config.merge_morpheme_breaks:
            text = merge_morpheme_breaks(text)
        if self.config.wrap_grammatical_glosses:
            text = wrap_grammatical_glosses(
                text, self.config.grammatical_gloss_set, self.config.gloss_macro
            )
        return text

    def parse(self, text: str) -> List[Example]:
        """Preprocess and parse raw TSV into examples."""
        return self.parser.parse(self.preprocess(text))

    def render(
        self,
        examples: List[Example],
        shape: Union[OutputShape, str],
        label: Optional[str] = None,
    ) -> str:
        """Render examples and substitute the label key when one is given."""
        markup = self.renderer.render(examples, shape)
        if label:
            markup = apply_label(markup, label)
        return markup

    def process(
        self,
        text: str,
        shape: Optional[Union[OutputShape, str]] = None,
        label: Optional[str] = None,
    ) -> InterlinearResult:
        """
        Convert raw TSV into gb4e markup.

        Args:
            text: Tiered TSV text
            shape: Output shape; defaults to the first shape suited to the
                number of examples ("single" or "list")
            label: Label key for the \\label placeholders

        Returns:
            InterlinearResult; an empty result carries NO_EXAMPLES_MESSAGE
            instead of markup
        """
        examples = self.parse(text)

        if not examples:
            logger.debug("No examples parsed from input")
            return InterlinearResult(message=NO_EXAMPLES_MESSAGE)

        if shape is None:
            shape = shapes_for(len(examples))[0]
        markup = self.render(examples, shape, label)
        shape = OutputShape(shape)

        rendered = examples[:1] if shape.single_example else examples
        counts = [
            len(select_aligned_lines(ex, self.config.max_aligned_lines).lines)
            for ex in rendered
        ]

        result = InterlinearResult(
            examples=examples,
            shape=shape,
            markup=markup,
            aligned_line_counts=counts,
        )

        logger.debug(
            f"Pipeline complete: {result.example_count} example(s) as '{shape.value}', "
            f"aligned lines {counts}"
        )

        return result


# Convenience function
def convert_tsv(
    text: str,
    shape: Optional[Union[OutputShape, str]] = None,
    label: Optional[str] = None,
    **options: Any,
) -> InterlinearResult:
    """
    Quick conversion of TSV text.

    Args:
        text: Tiered TSV text
        shape: Output shape (default depends on the example count)
        label: Label key for the \\label placeholders
        **options: InterlinearConfig fields (snake_case or camelCase)

    Returns:
        InterlinearResult
    """
    config = InterlinearConfig(**options)
    return InterlinearPipeline(config).process(text, shape=shape, label=label)
