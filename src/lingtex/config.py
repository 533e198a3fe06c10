#!/usr/bin/env python3
"""
Interlinear Conversion Settings

One immutable pydantic model holds every option the pipeline reads. It is
passed explicitly to each call and is never mutated, so concurrent
conversions cannot see each other's settings.

Settings can come from keyword arguments (snake_case or camelCase) or from a
JSON file, including a settings export whose keys carry the editor's
"lingtex.interlinear." prefix:

    {
        "lingtex.interlinear.maxLines": 3,
        "mergeMorphemeBreaks": true,
        "wrapGrammaticalGlosses": true,
        "grammaticalGlossSet": ["Pl", "Sg"],
        "glossMacro": "gl"
    }
"""

import json
from pathlib import Path
from typing import Any, Dict, FrozenSet, Mapping, Union
from logging import getLogger

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lingtex.alignment import DEFAULT_MAX_ALIGNED_LINES, MIN_ALIGNED_LINES
from lingtex.preprocessing import GLOSS_MACRO

logger = getLogger(__name__)


class ConfigError(Exception):
    """Raised when a settings file cannot be read or decoded."""
    pass


SETTING_PREFIXES = ("lingtex.", "interlinear.")

# Editor setting names that differ from the model aliases
SETTING_ALIASES = {
    "maxLines": "maxAlignedLines",
}


class InterlinearConfig(BaseModel):
    """Options for one TSV -> interlinear conversion."""

    merge_morpheme_breaks: bool = Field(
        default=True,
        alias="mergeMorphemeBreaks",
        description="Re-join clitic/affix fragments on the morpheme and lex-gloss tiers",
    )

    wrap_grammatical_glosses: bool = Field(
        default=False,
        alias="wrapGrammaticalGlosses",
        description="Wrap uppercase gloss abbreviations in \\gl{}",
    )

    max_aligned_lines: int = Field(
        default=DEFAULT_MAX_ALIGNED_LINES,
        alias="maxAlignedLines",
        description="Maximum number of aligned lines per example (values below 2 act as 2)",
    )

    grammatical_gloss_set: FrozenSet[str] = Field(
        default_factory=frozenset,
        alias="grammaticalGlossSet",
        description="Extra abbreviations treated as grammatical regardless of case",
        examples=[["Pl", "Sg"]],
    )

    tag_translation_languages: bool = Field(
        default=False,
        alias="tagTranslationLanguages",
        description="Prefix each free translation with its [language] tag",
    )

    gloss_macro: str = Field(
        default=GLOSS_MACRO,
        alias="glossMacro",
        pattern=r"^[A-Za-z]+$",
        description="Macro name (without backslash) used to wrap grammatical glosses",
        examples=["gl", "textsc"],
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("max_aligned_lines")
    @classmethod
    def _floor_max_aligned_lines(cls, value: int) -> int:
        return max(MIN_ALIGNED_LINES, value)

    @field_validator("grammatical_gloss_set", mode="before")
    @classmethod
    def _split_gloss_set(cls, value: Any) -> Any:
        # "PL, SG" from a settings field or CLI
        if isinstance(value, str):
            return {part.strip() for part in value.split(",") if part.strip()}
        return value

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "InterlinearConfig":
        """
        Build a config from a flat settings mapping.

        Keys may carry "lingtex." / "interlinear." prefixes; unknown keys are ignored.
        """
        normalized: Dict[str, Any] = {}
        for key, value in settings.items():
            name = key
            for prefix in SETTING_PREFIXES:
                if name.startswith(prefix):
                    name = name[len(prefix):]
            normalized[SETTING_ALIASES.get(name, name)] = value
        return cls.model_validate(normalized)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "InterlinearConfig":
        """
        Load settings from a JSON object file.

        Raises:
            ConfigError: If the file is missing, unreadable, or not a JSON object
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot read settings file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {path} must contain a JSON object")

        logger.debug(f"Loaded {len(data)} setting(s) from {path}")
        return cls.from_settings(data)

    def with_overrides(self, **overrides: Any) -> "InterlinearConfig":
        """Copy of this config with the given (non-None) fields replaced."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return self.model_validate({**self.model_dump(), **values})
