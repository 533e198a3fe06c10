#!/usr/bin/env python3
"""
Tiered Example Parser

Groups tab-separated tier lines into interlinear Example records.

Input conventions:
- `#` lines are comments
- A blank line ends the current example
- `Free ...` lines hold a free translation and always end the current example
- A row starting with a bare number opens a numbered example:
  `3<TAB>Morphemes<TAB>kaɾa<TAB>=tɛ ...`
- Any other row is `<tier name><TAB><token><TAB><token> ...`

The parser never raises on malformed input. Lines that do not form an
example simply produce fewer examples, and an empty result is the caller's
"no examples found" condition.

Usage:
    from lingtex.parsing import parse_examples

    examples = parse_examples(tsv_text)
    for ex in examples:
        print(ex.tier_order, ex.translation_text)
"""

import re
from typing import List, Optional
from logging import getLogger

from lingtex.utils import clean_text, has_invisible_marks, is_blank, normalize_spaces, strip_invisible
from lingtex.tokenization_service import tokenize_tsv_line, is_empty_cell, EMPTY_CELL
from .types import Example, ExampleBuilder, DEFAULT_TIER

logger = getLogger(__name__)


class ExampleParser:
    """
    Line-oriented parser for tiered interlinear TSV.

    Example:
        parser = ExampleParser()
        examples = parser.parse("Morphemes\\tpa\\tɾi\\nLex. Gloss\\tDET\\t2SG\\nFree\\tthis you")
        assert examples[0].tiers["Lex. Gloss"] == ["DET", "2SG"]
    """

    LINE_SPLIT_RE = re.compile(r"\r?\n")
    NUMBER_RE = re.compile(r"^\d+$")
    # "Free: text", "Free Eng text" when the line has no tab
    FREE_LABEL_RE = re.compile(r"^free\S*[:\-\s]*", re.IGNORECASE)

    FREE_PREFIX = "free"
    COMMENT_PREFIX = "#"

    def parse(self, text: str) -> List[Example]:
        """
        Parse raw TSV text into sealed examples, in source order.

        Args:
            text: Multi-line tab-separated text

        Returns:
            List of Example records (possibly empty)
        """
        examples: List[Example] = []
        current: Optional[ExampleBuilder] = None
        lines = self.LINE_SPLIT_RE.split(text or "")
        marked = 0

        for raw in lines:
            if has_invisible_marks(raw):
                marked += 1
            raw = normalize_spaces(raw).rstrip()

            if self._is_comment(raw):
                continue

            if is_blank(raw):
                self._seal(current, examples)
                current = None
                continue

            line = clean_text(raw)
            cols = tokenize_tsv_line(line)

            if cols[0].lower().startswith(self.FREE_PREFIX):
                if current is None:
                    current = ExampleBuilder()
                text_value, lang = self._extract_translation(line, cols[0])
                current.add_translation(text_value, lang)
                self._seal(current, examples)
                current = None
                continue

            if self.NUMBER_RE.match(cols[0]):
                tier_name = self._tier_name(cols[1] if len(cols) > 1 else EMPTY_CELL)
                values = cols[2:]
                if current is None:
                    current = ExampleBuilder(number=cols[0])
            else:
                tier_name = self._tier_name(cols[0])
                values = cols[1:]
                if current is None:
                    current = ExampleBuilder()

            current.set_tier(tier_name, values)

        self._seal(current, examples)
        logger.debug(
            f"Parsed {len(examples)} example(s) from {len(lines)} line(s), "
            f"{marked} with invisible marks"
        )
        return examples

    def _is_comment(self, raw: str) -> bool:
        return strip_invisible(raw).strip().startswith(self.COMMENT_PREFIX)

    def _tier_name(self, cell: str) -> str:
        # Labels went through the tokenizer too; give them their spaces back
        if is_empty_cell(cell):
            return DEFAULT_TIER
        return cell.replace(EMPTY_CELL, " ")

    def _extract_translation(self, line: str, label_cell: str):
        """
        Pull translation text and language tag out of a Free line.

        Text comes from the untokenized line so literal spaces survive.
        """
        tab_pos = line.find("\t")
        if tab_pos >= 0:
            text_value = line[tab_pos + 1:].strip()
            lang = label_cell[len(self.FREE_PREFIX):].replace(EMPTY_CELL, " ").strip()
            return text_value, (lang or None)

        return self.FREE_LABEL_RE.sub("", line, count=1).strip(), None

    @staticmethod
    def _seal(current: Optional[ExampleBuilder], examples: List[Example]) -> None:
        """Push the current example if it has tier data."""
        if current is not None and current.has_tiers:
            examples.append(current.seal())


def parse_examples(text: str) -> List[Example]:
    """
    Quick parsing of tiered TSV text.

    Args:
        text: Raw TSV

    Returns:
        Parsed examples
    """
    return ExampleParser().parse(text)
