#!/usr/bin/env python3
"""
TSV -> Interlinear Command Line

Converts tiered TSV (or a filled-in input template) into gb4e interlinear
markup.

Usage:
    lingtex-interlinear examples.tsv                  # every applicable shape
    lingtex-interlinear examples.tsv --shape list --label ex:kara
    pbpaste | lingtex-interlinear --shape single --wrap-glosses
    lingtex-interlinear --template > input.txt        # blank input template
    python -m lingtex examples.tsv -o examples.tex

Without --shape, the output holds one block per shape that fits the number
of examples, each under a `===== (n) Title =====` header.

Exit status is 0 on success and 1 when no examples were found or the input,
output or settings file could not be used.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from lingtex.config import ConfigError, InterlinearConfig
from lingtex.pipeline import InterlinearPipeline, NO_EXAMPLES_MESSAGE
from lingtex.rendering import OutputShape, shapes_for
from lingtex.template import (
    DEFAULT_LABEL,
    build_input_template,
    is_input_template,
    parse_input_template,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lingtex-interlinear",
        description="Convert tiered TSV into gb4e interlinear markup",
    )
    parser.add_argument(
        'input',
        nargs='?',
        default='-',
        help="TSV or input-template file (default: standard input)"
    )
    parser.add_argument(
        '--shape',
        choices=[shape.value for shape in OutputShape],
        help="Output shape (default: print every shape that fits the example count)"
    )
    parser.add_argument(
        '--max-lines',
        type=int,
        dest='max_lines',
        help="Maximum aligned lines per example (values below 2 act as 2)"
    )
    parser.add_argument(
        '--merge-breaks',
        dest='merge_breaks',
        action='store_true',
        default=None,
        help="Re-join clitic/affix fragments (default)"
    )
    parser.add_argument(
        '--no-merge-breaks',
        dest='merge_breaks',
        action='store_false',
        help="Keep morpheme fragments as separate tokens"
    )
    parser.add_argument(
        '--wrap-glosses',
        action='store_true',
        default=None,
        help="Wrap grammatical gloss abbreviations in \\gl{}"
    )
    parser.add_argument(
        '--gloss',
        action='append',
        metavar='ABBR',
        help="Extra grammatical abbreviation (repeatable)"
    )
    parser.add_argument(
        '--tag-languages',
        action='store_true',
        default=None,
        help="Prefix free translations with their [language] tag"
    )
    parser.add_argument(
        '--config',
        type=Path,
        help="JSON settings file"
    )
    parser.add_argument(
        '--label',
        help="Label key substituted into the \\label placeholders"
    )
    parser.add_argument(
        '-o', '--output',
        type=Path,
        help="Write markup to this file instead of standard output"
    )
    parser.add_argument(
        '--template',
        action='store_true',
        help="Print a blank input template and exit"
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help="Debug logging"
    )
    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help="Only log warnings and errors"
    )
    return parser


def load_config(args: argparse.Namespace) -> InterlinearConfig:
    """Settings file (if any) with command-line overrides on top."""
    config = InterlinearConfig.from_json_file(args.config) if args.config else InterlinearConfig()

    gloss_set = None
    if args.gloss:
        gloss_set = set(config.grammatical_gloss_set) | set(args.gloss)

    return config.with_overrides(
        max_aligned_lines=args.max_lines,
        merge_morpheme_breaks=args.merge_breaks,
        wrap_grammatical_glosses=args.wrap_glosses,
        grammatical_gloss_set=gloss_set,
        tag_translation_languages=args.tag_languages,
    )


def read_input(source: str) -> str:
    if source == '-':
        return sys.stdin.read()
    return Path(source).read_text(encoding='utf-8')


def render_all_shapes(pipeline: InterlinearPipeline, examples, label: Optional[str]) -> str:
    """Every applicable shape under numbered headers."""
    output = ''
    for n, shape in enumerate(shapes_for(len(examples)), start=1):
        code = pipeline.render(examples, shape, label)
        output += f"\n===== ({n}) {shape.title} =====\n\n{code}\n"
    return output.lstrip()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Setup logging
    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )

    if args.template:
        destination = str(args.output) if args.output else None
        print(build_input_template(label=args.label or DEFAULT_LABEL, destination=destination))
        return 0

    try:
        config = load_config(args)
    except (ConfigError, ValidationError) as e:
        logger.error(f"Invalid settings: {e}")
        return 1

    try:
        text = read_input(args.input)
    except OSError as e:
        logger.error(f"Cannot read input {args.input}: {e}")
        return 1

    label = args.label
    if is_input_template(text):
        parsed = parse_input_template(text)
        logger.debug(f"Input template detected, label '{parsed.label}'")
        text = parsed.tsv
        if parsed.label != DEFAULT_LABEL:
            label = label or parsed.label

    pipeline = InterlinearPipeline(config)
    examples = pipeline.parse(text)

    if not examples:
        logger.error(NO_EXAMPLES_MESSAGE)
        return 1

    logger.info(f"Parsed {len(examples)} example(s)")

    if args.shape:
        output = pipeline.render(examples, args.shape, label)
    else:
        output = render_all_shapes(pipeline, examples, label)

    if args.output:
        try:
            args.output.write_text(output, encoding='utf-8')
        except OSError as e:
            logger.error(f"Cannot write output {args.output}: {e}")
            return 1
        logger.info(f"Wrote markup to {args.output}")
    else:
        print(output)

    return 0


if __name__ == '__main__':
    sys.exit(main())
