"""
Command-line interface for the baluster calculator.

Usage:
    baluster SPAN THICKNESS [--rules PATH] [--json] [-v]
    python -m baluster SPAN THICKNESS ...

Exit status is 0 when a layout is found, 1 when the inputs are rejected or
no layout fits, and 2 for bad arguments or an invalid rules file.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from baluster.api.calculate import SUPPORTED_INPUT_EXAMPLES, calculate
from baluster.spacing.rules import RulesError, get_rules, load_rules
from baluster.spacing.types import SpacingResult

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="baluster",
        description="Evenly space balusters across a railing span.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Measurements are in inches and may be typed as fractions:\n  "
            + ", ".join(SUPPORTED_INPUT_EXAMPLES)
            + "\n\nExamples:\n"
            "  baluster 36 1½              # 36 in span, 1½ in posts\n"
            '  baluster "35 3/4" 1.5 --json\n'
            "  baluster 48 2 --rules my_rules.yaml\n"
        ),
    )
    parser.add_argument("span", help="total span between end supports")
    parser.add_argument("thickness", help="baluster thickness")
    parser.add_argument(
        "--rules",
        "-r",
        metavar="PATH",
        help="spacing rules YAML file (default: packaged rules)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the result as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="log search details to stderr",
    )
    return parser


def render_result(result: SpacingResult) -> str:
    """Human-readable summary of a result."""
    if not result.success:
        return f"Error: {result.message}"
    return "\n".join(
        [
            f"Balusters:    {result.post_count}",
            f"First center: {result.edge_offset}",
            f"Step:         {result.pitch}",
            f"Match:        {result.match_type}",
        ]
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        rules = load_rules(args.rules) if args.rules else get_rules()
    except (FileNotFoundError, RulesError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logger.debug(f"Using spacing rules: {rules}")
    result = calculate(args.span, args.thickness, rules)
    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False))
    else:
        print(render_result(result))
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
