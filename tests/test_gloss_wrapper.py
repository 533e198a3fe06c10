#!/usr/bin/env python3
"""
Tests for grammatical-gloss wrapping.
"""

import pytest
from lingtex.preprocessing import wrap_grammatical_glosses, wrap_gloss_cell, is_grammatical


class TestGrammaticalDetection:
    """Test which gloss segments count as grammatical."""

    @pytest.mark.parametrize("segment", ["DET", "1SG", "3", "EXST"])
    def test_uppercase_and_digits(self, segment):
        assert is_grammatical(segment)

    @pytest.mark.parametrize("segment", ["", "tree", "Kara", "***", "Pl"])
    def test_lexical(self, segment):
        assert not is_grammatical(segment)

    def test_custom_gloss_set(self):
        assert is_grammatical("Pl", {"Pl"})
        assert not is_grammatical("pl", {"Pl"})


class TestCellWrapping:
    """Test wrapping of single gloss cells."""

    def test_single_abbreviation(self):
        assert wrap_gloss_cell("DET") == "\\gl{det}"

    def test_segments_split_on_markers(self):
        assert wrap_gloss_cell("1SG.EXCL") == "\\gl{1sg}.\\gl{excl}"

    def test_mixed_lexical_and_grammatical(self):
        assert wrap_gloss_cell("Kara=LOC=EXST.CMP") == "Kara=\\gl{loc}=\\gl{exst}.\\gl{cmp}"

    def test_lexical_gloss_untouched(self):
        assert wrap_gloss_cell("chop.down") == "chop.down"

    def test_custom_set_lowercases(self):
        assert wrap_gloss_cell("word-Pl", {"Pl"}) == "word-\\gl{pl}"

    def test_empty_cell(self):
        assert wrap_gloss_cell("") == ""


class TestTextWrapping:
    """Test wrapping over whole TSV texts."""

    def test_only_lex_gloss_row_changes(self, simple_tsv):
        rows = wrap_grammatical_glosses(simple_tsv).split("\n")

        assert rows[0] == "Morphemes\tpa\tɾi"
        assert rows[1] == "Lex. Gloss\t\\gl{det}\t\\gl{2sg}"
        assert rows[2] == "Free\tthis you"

    def test_other_tiers_with_uppercase_untouched(self):
        text = "Morphemes\tDET\nWord Gloss\tDET\nLex. Gloss\tDET"
        rows = wrap_grammatical_glosses(text).split("\n")

        assert rows[0] == "Morphemes\tDET"
        assert rows[1] == "Word Gloss\tDET"
        assert rows[2] == "Lex. Gloss\t\\gl{det}"

    def test_numbered_layout(self):
        text = "1\tMorphemes\tpa\n\tLex. Gloss\tDET"
        assert wrap_grammatical_glosses(text) == "1\tMorphemes\tpa\n\tLex. Gloss\t\\gl{det}"

    def test_free_line_untouched(self):
        text = "Lex. Gloss\tDET\nFree\tlexical gloss of the U.S.A. word"
        rows = wrap_grammatical_glosses(text).split("\n")

        assert rows[0] == "Lex. Gloss\t\\gl{det}"
        assert rows[1] == "Free\tlexical gloss of the U.S.A. word"

    def test_data_cell_is_not_read_as_a_label(self):
        text = "Word Gloss\tlex gloss\tPL"
        assert wrap_grammatical_glosses(text) == text

    def test_free_label_behind_number(self):
        text = "1\tFree lex gloss\tU.S.A."
        assert wrap_grammatical_glosses(text) == text

    def test_custom_macro(self):
        text = "Lex. Gloss\tDET"
        assert wrap_grammatical_glosses(text, macro="textsc") == "Lex. Gloss\t\\textsc{det}"

    def test_gloss_set_passed_through(self):
        text = "Lex. Gloss\tword-Pl"
        assert wrap_grammatical_glosses(text, {"Pl"}) == "Lex. Gloss\tword-\\gl{pl}"

    def test_empty_text(self):
        assert wrap_grammatical_glosses("") == ""
