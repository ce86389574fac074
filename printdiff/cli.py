# printdiff/cli.py
"""printdiff command line - show what changed between two files.

Usage:
    # Text files, line by line
    printdiff old.txt new.txt

    # JSON or YAML documents, key by key
    printdiff --structured old.json new.json

    # Narrow output without color, at most 50 rows
    printdiff --width 60 --no-color --max-chunks 50 old.txt new.txt

Exit codes:
    0  Inputs are equal
    1  Inputs differ
    2  An input could not be read, decoded or parsed
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .api import print_diff
from .config import default_config
from .errors import PrintDiffError

logger = logging.getLogger(__name__)

EXIT_EQUAL = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2

# Flags forwarded to DiffConfig.with_overrides as raw strings, so invalid
# values are ignored the same way environment overrides are
_NUMERIC_FLAGS = {
    "width": "wrap_width",
    "max_chunks": "max_chunks",
    "max_chunks_per_line": "max_chunks_per_line",
    "max_columns": "max_columns",
    "context_lines": "context_lines",
    "context_columns": "context_columns",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="printdiff",
        description="Show a bounded, terminal-friendly diff of two files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  printdiff old.txt new.txt
  printdiff --structured old.json new.yaml
  printdiff --context-lines 1 --gaps old.txt new.txt
        """,
    )
    parser.add_argument("old", help="Base file")
    parser.add_argument("new", help="File compared against the base")
    parser.add_argument(
        "--structured", "-s",
        action="store_true",
        help="Parse both files as JSON (YAML for .yaml/.yml) and diff key by key",
    )
    parser.add_argument("--width", "-w", metavar="N", help="Display width (default: terminal width)")
    parser.add_argument("--max-chunks", metavar="N", help="Maximum rows in total (default: 200)")
    parser.add_argument(
        "--max-chunks-per-line", metavar="N",
        help="Maximum rows per changed line (default: 20)",
    )
    parser.add_argument(
        "--max-columns", metavar="N",
        help="Characters shown per highlighted span (default: 50)",
    )
    parser.add_argument(
        "--context-lines", "-C", metavar="N",
        help="Unchanged lines around changes (default: 3)",
    )
    parser.add_argument(
        "--context-columns", metavar="N",
        help="Unchanged characters around changed spans (default: 25)",
    )
    color = parser.add_mutually_exclusive_group()
    color.add_argument("--color", dest="colors", action="store_const", const=True, help="Force color output")
    color.add_argument("--no-color", dest="colors", action="store_const", const=False, help="Disable color output")
    parser.add_argument(
        "--gaps",
        action="store_true",
        default=None,
        help="Mark skipped unchanged lines with '...'",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    return parser


def load_operand(path: Path, structured: bool) -> Any:
    """Read one input file, parsed when structured."""
    content = path.read_text(encoding="utf-8")
    if not structured:
        return content
    if path.suffix in (".yaml", ".yml"):
        return yaml.safe_load(content)
    return json.loads(content)


def collect_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for flag, option in _NUMERIC_FLAGS.items():
        value = getattr(args, flag)
        if value is not None:
            overrides[option] = value
    if args.colors is not None:
        overrides["colors"] = args.colors
    if args.gaps is not None:
        overrides["show_gaps"] = args.gaps
    return overrides


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        old = load_operand(Path(args.old), args.structured)
        new = load_operand(Path(args.new), args.structured)
    except OSError as e:
        print(f"printdiff: {e}", file=sys.stderr)
        return EXIT_ERROR
    except UnicodeDecodeError as e:
        print(f"printdiff: cannot decode input as UTF-8: {e}", file=sys.stderr)
        return EXIT_ERROR
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        print(f"printdiff: cannot parse input: {e}", file=sys.stderr)
        return EXIT_ERROR

    config = default_config().with_overrides(collect_overrides(args))
    logger.debug("Using %s", config)

    try:
        rows = print_diff(old, new, config)
    except PrintDiffError as e:
        print(f"printdiff: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_DIFFERENT if rows else EXIT_EQUAL
