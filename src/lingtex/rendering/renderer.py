#!/usr/bin/env python3
"""
gb4e Markup Renderer

Renders parsed examples as gb4e interlinear markup in one of six shapes:

    single        one example in its own exe environment
    list-starter  one example as item (a) of a new xlist
    list-item     one example as an item for an existing xlist
    list          several examples as sub-examples (a, b, c, ...) of one \\ex
    list-items    several examples as items for an existing xlist
    text          several examples as a flat sequence of numbered examples

Every item carries a `% \\label{ex:KEY...}` placeholder comment; `apply_label`
turns the placeholders into real labels.

Usage:
    from lingtex.rendering import InterlinearRenderer, OutputShape

    renderer = InterlinearRenderer()
    print(renderer.render(examples, OutputShape.LIST))
"""

import re
import string
from enum import Enum
from typing import List, Optional, Sequence, Union
from logging import getLogger

from lingtex.alignment import select_aligned_lines
from lingtex.config import InterlinearConfig
from lingtex.parsing import Example
from .latex import latex_escape

logger = getLogger(__name__)


class RenderError(ValueError):
    """Raised when examples cannot be rendered in the requested shape."""
    pass


class OutputShape(str, Enum):
    """Markup shapes the renderer can emit."""
    SINGLE = "single"
    LIST_STARTER = "list-starter"
    LIST_ITEM = "list-item"
    LIST = "list"
    LIST_ITEMS = "list-items"
    TEXT = "text"

    @property
    def title(self) -> str:
        return SHAPE_TITLES[self]

    @property
    def single_example(self) -> bool:
        return self in SINGLE_EXAMPLE_SHAPES


SHAPE_TITLES = {
    OutputShape.SINGLE: "Single example",
    OutputShape.LIST_STARTER: "Start list example (this as first item)",
    OutputShape.LIST_ITEM: "List item (to add into existing xlist)",
    OutputShape.LIST: "List example",
    OutputShape.LIST_ITEMS: "Items for an existing list",
    OutputShape.TEXT: "Interlinear text (sequence)",
}

SINGLE_EXAMPLE_SHAPES = (OutputShape.SINGLE, OutputShape.LIST_STARTER, OutputShape.LIST_ITEM)
MULTI_EXAMPLE_SHAPES = (OutputShape.LIST, OutputShape.LIST_ITEMS, OutputShape.TEXT)

NO_ALIGNED_LINES = "% (no aligned interlinear lines)"
TRANSLATION_MACRO = "glt"
LABEL_PLACEHOLDER_RE = re.compile(r"% \\label\{ex:KEY([^}]*)\}")
SUBEXAMPLE_LETTERS = string.ascii_lowercase


def shapes_for(count: int) -> Sequence[OutputShape]:
    """Shapes that make sense for the given number of examples."""
    return SINGLE_EXAMPLE_SHAPES if count == 1 else MULTI_EXAMPLE_SHAPES


def label_placeholder(suffix: str = "") -> str:
    return f"\\ex % \\label{{ex:KEY{suffix}}}"


def subexample_suffix(index: int) -> str:
    """-a, -b, ... -z, then numeric suffixes."""
    if index < len(SUBEXAMPLE_LETTERS):
        return f"-{SUBEXAMPLE_LETTERS[index]}"
    return f"-{index + 1}"


def render_translation(example: Example, tag_languages: bool = False) -> Optional[str]:
    """
    Free translation text of an example, or None when there is none.

    Multiple translations are joined with a space; with `tag_languages`,
    texts that have a language are prefixed "[lang] ".
    """
    texts = []
    for translation in example.free_translations:
        if not translation.text:
            continue
        if tag_languages and translation.lang:
            texts.append(f"[{translation.lang.strip()}] {translation.text}")
        else:
            texts.append(translation.text)
    joined = " ".join(texts)
    return joined or None


def apply_label(markup: str, key: str) -> str:
    """
    Turn label placeholders into real labels.

    `% \\label{ex:KEY-a}` becomes `\\label{<key>-a}`. A blank key leaves the
    markup unchanged; text other than the placeholders is never touched.
    """
    key = (key or "").strip()
    if not key:
        return markup
    return LABEL_PLACEHOLDER_RE.sub(lambda m: f"\\label{{{key}{m.group(1)}}}", markup)


class InterlinearRenderer:
    """
    Renders examples to gb4e markup using one conversion config.

    Example:
        renderer = InterlinearRenderer(InterlinearConfig(max_aligned_lines=3))
        body = renderer.render_example(example)
    """

    def __init__(self, config: Optional[InterlinearConfig] = None):
        self.config = config or InterlinearConfig()

    def render_example(self, example: Example) -> str:
        """
        Body of one example: alignment macro, continuation lines, \\glt line.

        Without aligned lines only the translation is emitted, or a comment
        when there is no translation either.
        """
        aligned = select_aligned_lines(example, self.config.max_aligned_lines)
        macro = self.config.gloss_macro
        glt = render_translation(example, self.config.tag_translation_languages)
        trans = f"\\{TRANSLATION_MACRO} {latex_escape(glt, macro)}" if glt else ""

        if not aligned.lines:
            return trans or NO_ALIGNED_LINES

        parts = [f"\\{aligned.macro} {latex_escape(aligned.lines[0], macro)} \\\\"]
        parts.extend(f"{latex_escape(line, macro)} \\\\" for line in aligned.lines[1:])
        if trans:
            parts.append(trans)
        return "\n".join(parts)

    def as_single_example(self, example: Example) -> str:
        return "\n".join([
            "\n% Single example",
            "\n\\begin{exe}",
            label_placeholder(),
            self.render_example(example),
            "\\end{exe}\n",
        ])

    def as_list_starter(self, example: Example) -> str:
        return "\n".join([
            "\n% Start a list example with this as (a).",
            "\n\\begin{exe}",
            label_placeholder(),
            "\\begin{xlist}",
            label_placeholder(subexample_suffix(0)),
            self.render_example(example),
            "% Add more items as needed...",
            "\\end{xlist}",
            "\\end{exe}\n",
        ])

    def as_list_item(self, example: Example) -> str:
        return "\n".join([
            "\n% List item to add inside an existing xlist",
            label_placeholder("-?"),
            self.render_example(example),
            "",
        ])

    def as_list_of_examples(self, examples: List[Example]) -> str:
        items = "\n".join(
            f"{label_placeholder(subexample_suffix(i))}\n{self.render_example(ex)}"
            for i, ex in enumerate(examples)
        )
        return "\n".join([
            "\n% List example (numbered subexamples a, b, c, ...)",
            "\n\\begin{exe}",
            label_placeholder(),
            "\\begin{xlist}",
            items,
            "\\end{xlist}",
            "\\end{exe}\n",
        ])

    def as_items_for_existing_list(self, examples: List[Example]) -> str:
        return "\n".join(
            f"{label_placeholder(f'-{i + 1}')}\n{self.render_example(ex)}"
            for i, ex in enumerate(examples)
        )

    def as_interlinear_text(self, examples: List[Example]) -> str:
        items = "\n".join(
            f"{label_placeholder(f'-{i + 1}')}\n{self.render_example(ex)}"
            for i, ex in enumerate(examples)
        )
        return "\n".join([
            "\n% Interlinear text (sequence of numbered examples)",
            "\n\\begin{exe}",
            items,
            "\\end{exe}\n",
        ])

    def render(self, examples: List[Example], shape: Union[OutputShape, str]) -> str:
        """
        Render examples in the requested shape.

        Single-example shapes render the first example only.

        Raises:
            RenderError: If there are no examples or the shape is unknown
        """
        try:
            shape = OutputShape(shape)
        except ValueError as e:
            raise RenderError(f"Unknown output shape: {shape!r}") from e

        if not examples:
            raise RenderError("No examples to render")

        if shape.single_example and len(examples) > 1:
            logger.warning(f"Shape '{shape.value}' renders one example; ignoring {len(examples) - 1} more")

        if shape is OutputShape.SINGLE:
            return self.as_single_example(examples[0])
        if shape is OutputShape.LIST_STARTER:
            return self.as_list_starter(examples[0])
        if shape is OutputShape.LIST_ITEM:
            return self.as_list_item(examples[0])
        if shape is OutputShape.LIST:
            return self.as_list_of_examples(examples)
        if shape is OutputShape.LIST_ITEMS:
            return self.as_items_for_existing_list(examples)
        return self.as_interlinear_text(examples)


def render_example_body(example: Example, config: Optional[InterlinearConfig] = None) -> str:
    """Body lines of one example (no exe/xlist wrapper, no label)."""
    return InterlinearRenderer(config).render_example(example)


def render(
    examples: List[Example],
    shape: Union[OutputShape, str],
    config: Optional[InterlinearConfig] = None,
) -> str:
    """
    Quick rendering of examples.

    Args:
        examples: Parsed examples
        shape: Output shape (enum member or its value, e.g. "list")
        config: Conversion settings (defaults apply when omitted)

    Returns:
        gb4e markup text
    """
    return InterlinearRenderer(config).render(examples, shape)
