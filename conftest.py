"""
Pytest configuration file for proper Unicode/UTF-8 handling and shared
sample TSV fixtures.
"""

import sys
import os

import pytest

# Force UTF-8 encoding globally
os.environ['PYTHONIOENCODING'] = 'utf-8'

# IPA characters in samples and output must survive a Windows console
if sys.platform == 'win32' and hasattr(sys.stdout, 'reconfigure'):
    sys.stdout.reconfigure(encoding='utf-8', errors='replace')
    sys.stderr.reconfigure(encoding='utf-8', errors='replace')


# Morpheme tier split at clitic boundaries, as exported by FLEx
KARA_TSV = "\n".join([
    "Morphemes\tkaɾa\t=tɛ\t=hi\tuː",
    "Lex. Gloss\tKara\tLOC\tEXST.CMP\ttree",
    "Word Gloss\tat Kara\t\t\ttree",
    "Free Eng\tThere is a tree at Kara.",
])

SIMPLE_TSV = "\n".join([
    "Morphemes\tpa\tɾi",
    "Lex. Gloss\tDET\t2SG",
    "Free\tthis you",
])

TWO_EXAMPLES_TSV = "\n".join([
    "1\tMorphemes\tpa\tɾi",
    "\tLex. Gloss\tDET\t2SG",
    "Free\tthis you",
    "",
    "2\tMorphemes\tobwi\tnaʉ",
    "\tLex. Gloss\tword\tsay",
    "Free\tsay the word",
])


@pytest.fixture
def kara_tsv():
    return KARA_TSV


@pytest.fixture
def simple_tsv():
    return SIMPLE_TSV


@pytest.fixture
def two_examples_tsv():
    return TWO_EXAMPLES_TSV
