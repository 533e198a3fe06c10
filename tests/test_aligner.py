#!/usr/bin/env python3
"""
Tests for tier ordering and aligned-line selection.
"""

import pytest
from lingtex.alignment import (
    order_tiers,
    gather_aligned_lines,
    aligned_line_count,
    select_aligned_lines,
)
from lingtex.parsing import Example


def make_example(*tiers):
    """Example from (name, tokens) pairs, in encounter order."""
    return Example(
        tiers={name: list(tokens) for name, tokens in tiers},
        tier_order=[name for name, _ in tiers],
    )


@pytest.fixture
def four_tier_example():
    return make_example(
        ("Lex. Gloss", ["DET", "2SG"]),
        ("Custom", ["x", "y"]),
        ("Morphemes", ["pa", "ɾi"]),
        ("Word", ["pa", "ɾi"]),
    )


class TestTierOrder:
    """Test canonical-first tier ordering."""

    def test_canonical_tiers_first(self, four_tier_example):
        assert order_tiers(four_tier_example) == ["Word", "Morphemes", "Lex. Gloss", "Custom"]

    def test_case_insensitive_canonical_match(self):
        ex = make_example(("lex. gloss", ["A"]), ("MORPHEMES", ["a"]))
        assert order_tiers(ex) == ["MORPHEMES", "lex. gloss"]

    def test_free_tiers_excluded(self):
        ex = make_example(("Morphemes", ["a"]), ("Free notes", ["x"]))
        assert order_tiers(ex) == ["Morphemes"]

    def test_blank_tiers_skipped(self):
        ex = make_example(("Morphemes", ["a", "b"]), ("Lex. Gloss", ["", " "]))
        assert gather_aligned_lines(ex) == ["a b"]

    def test_placeholder_tokens_are_not_blank(self):
        ex = make_example(("Morphemes", ["a"]), ("Word Gloss", ["~"]))
        assert gather_aligned_lines(ex) == ["a", "~"]


class TestLineCount:
    """Test the aligned-line cap."""

    @pytest.mark.parametrize("available,max_lines,expected", [
        (0, 5, 2),
        (1, 5, 2),
        (3, 5, 3),
        (7, 5, 5),
        (4, 1, 2),
        (4, 0, 2),
    ])
    def test_count_formula(self, available, max_lines, expected):
        assert aligned_line_count(available, max_lines) == expected

    @pytest.mark.parametrize("max_lines", [-1, 0, 1, 2])
    def test_max_lines_floor(self, four_tier_example, max_lines):
        aligned = select_aligned_lines(four_tier_example, max_lines)
        assert aligned.macro == "gll"
        assert aligned.lines == ["pa ɾi", "pa ɾi"]

    def test_cap_drops_trailing_tiers(self, four_tier_example):
        aligned = select_aligned_lines(four_tier_example, 3)

        assert aligned.macro == "glll"
        assert aligned.count == 3
        assert aligned.lines == ["pa ɾi", "pa ɾi", "DET 2SG"]
        assert aligned.available == 4

    def test_all_tiers_under_default_cap(self, four_tier_example):
        aligned = select_aligned_lines(four_tier_example)
        assert aligned.macro == "gllll"
        assert len(aligned.lines) == 4

    def test_single_tier_still_uses_gll(self):
        aligned = select_aligned_lines(make_example(("Morphemes", ["a"])))
        assert aligned.macro == "gll"
        assert aligned.lines == ["a"]
