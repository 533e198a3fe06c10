#!/usr/bin/env python3
"""
Interlinear Example Data Types

Pydantic models for parsed interlinear examples. An Example is sealed as a
frozen model once the parser has seen its terminating blank line, free
translation line, or the end of input.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_TIER = "Morphemes"


class FreeTranslation(BaseModel):
    """Free (non-aligned) translation of a whole example."""

    lang: Optional[str] = Field(
        default=None,
        description="Language tag taken from the label cell (e.g. 'Eng' in 'Free Eng')",
        examples=["Eng", None],
    )

    text: str = Field(
        default="",
        description="Translation text with literal spaces preserved",
        examples=["Mr. Seth, I'm telling you this:"],
    )

    model_config = ConfigDict(frozen=True)


class Example(BaseModel):
    """
    One interlinear item: named tiers of aligned tokens plus free translations.

    `tiers` is insertion ordered, and `tier_order` records the first-encounter
    order of tier names independently of it. Re-encountering a tier replaces
    its tokens but keeps its position.
    """

    number: Optional[str] = Field(
        default=None,
        description="Leading numeric label from the source, kept verbatim",
        examples=["3"],
    )

    tiers: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Tier name -> ordered token sequence",
        examples=[{"Morphemes": ["kaɾa=tɛ=hi", "uː"], "Lex. Gloss": ["Kara=LOC=EXST.CMP", "tree"]}],
    )

    tier_order: List[str] = Field(
        default_factory=list,
        description="Tier names in the order first encountered, without duplicates",
    )

    free_translations: List[FreeTranslation] = Field(
        default_factory=list,
        description="Zero or more free translation lines, in source order",
    )

    model_config = ConfigDict(frozen=True)

    @property
    def has_tiers(self) -> bool:
        return bool(self.tiers)

    @property
    def translation_text(self) -> str:
        """All free translation texts joined with a space."""
        return " ".join(f.text for f in self.free_translations if f.text)

    def tier(self, name: str) -> Optional[List[str]]:
        """Look up a tier by name, case-insensitively."""
        wanted = name.lower()
        for tier_name in self.tier_order:
            if tier_name.lower() == wanted:
                return self.tiers.get(tier_name)
        return None


class ExampleBuilder:
    """
    Mutable accumulator for the example currently being parsed.

    Only `seal()` produces an Example, so nothing downstream ever sees a
    half-built record.
    """

    def __init__(self, number: Optional[str] = None):
        self.number = number
        self.tiers: Dict[str, List[str]] = {}
        self.tier_order: List[str] = []
        self.free_translations: List[FreeTranslation] = []

    def set_tier(self, name: str, values: List[str]) -> None:
        self.tiers[name] = list(values)
        if name not in self.tier_order:
            self.tier_order.append(name)

    def add_translation(self, text: str, lang: Optional[str] = None) -> None:
        self.free_translations.append(FreeTranslation(lang=lang, text=text))

    @property
    def has_tiers(self) -> bool:
        return bool(self.tiers)

    def seal(self) -> Example:
        return Example(
            number=self.number,
            tiers=self.tiers,
            tier_order=self.tier_order,
            free_translations=self.free_translations,
        )
