"""
Editor input template for TSV -> interlinear conversion.

The template is a small text document: comment header, a `Label:` line, a
`---` separator and the TSV body below it. Users paste their tiered TSV
after the separator and feed the whole document back to the converter.

Usage:
    from lingtex.template import build_input_template, parse_input_template

    text = build_input_template(label="ex:kara")
    parsed = parse_input_template(text)
    print(parsed.label, parsed.tsv)
"""

from typing import Optional

from pydantic import BaseModel, Field


TEMPLATE_MARKER = "# TSV → Interlinear input"
BODY_SEPARATOR = "---"
DEFAULT_LABEL = "interlinear-example"
LABEL_PREFIX = "Label:"

SAMPLE_ROWS = [
    "Morphemes\tpa sɛn\tɛɾi\ta\t=bo\tɾi\tobwi\tnaʉ\t-ɥo",
    "Lex. Gloss\t***\tDET\t1SG\tERG\t2SG\tword\tsay\tINCMP",
    "Word Gloss\tMr. Seth\tthis\tI\t\tyou\tinform\t\t",
    "Free Eng\tMr. Seth, I'm telling you this:",
]


class TemplateInput(BaseModel):
    """Label and TSV body read back from a filled-in template."""

    label: str = Field(
        default=DEFAULT_LABEL,
        description="Label key from the `Label:` header line",
        examples=["ex:kara"],
    )

    tsv: str = Field(
        default="",
        description="TSV body below the separator, comment lines removed",
    )


def build_input_template(label: str = DEFAULT_LABEL, destination: Optional[str] = None) -> str:
    """
    Template text with header comments, label line and a sample example.

    Args:
        label: Initial label key
        destination: Where the output will go (shown in a comment); standard
            output when omitted
    """
    target = destination or "standard output"
    return "\n".join([
        TEMPLATE_MARKER,
        "# Paste tiered TSV after the --- line (no header row). Lines starting with # are ignored.",
        "# Example tiers: (Number)\tMorphemes\t... or Word\t..., Lex. Gloss\t..., Word Gloss\t..., Free\t... ",
        "# Leave a blank line between examples, or include a Free line to terminate an example.",
        f"# Output destination: {target}",
        f"{LABEL_PREFIX} {label}",
        BODY_SEPARATOR,
        *SAMPLE_ROWS,
        "",
    ])


def _lines(text: str):
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def is_input_template(text: str) -> bool:
    """True when the text has the template header and a separator line."""
    if TEMPLATE_MARKER not in text:
        return False
    return any(line.rstrip() == BODY_SEPARATOR for line in _lines(text))


def parse_input_template(text: str) -> TemplateInput:
    """
    Read the label and TSV body back from template text.

    Header lines before `---` may set the label; `#` lines are ignored
    everywhere. An empty `Label:` keeps the default.
    """
    label = DEFAULT_LABEL
    body = []
    in_body = False

    for raw in _lines(text):
        line = raw.rstrip()
        if line.startswith("#"):
            continue
        if in_body:
            body.append(line)
            continue
        if line == BODY_SEPARATOR:
            in_body = True
            continue
        if line.startswith(LABEL_PREFIX):
            label = line[len(LABEL_PREFIX):].strip() or label

    return TemplateInput(label=label, tsv="\n".join(body))
