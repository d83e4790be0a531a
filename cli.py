#!/usr/bin/env python3
"""
spacecollapse CLI

Collapses runs of two or more spaces in text files, in place, while keeping
the spacing inside markup tags (e.g. <pre>  ...  </pre>) untouched.
"""

import argparse
import sys
from pathlib import Path

from rewriter.dispatcher import process_paths
from exporters import to_text, to_json


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="spacecollapse",
        description="Collapse repeated spaces in files, leaving markup tag bodies untouched.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  spacecollapse article.wiki             # Rewrite one file in place
  spacecollapse *.html                   # Rewrite several files concurrently
  spacecollapse --check docs/*.txt       # Exit 1 if any file would change
  spacecollapse -v -f json a.txt b.txt   # Print a JSON summary of the run
        """,
    )

    # Positional arguments
    parser.add_argument(
        "paths",
        nargs="*",
        help="Files to process",
    )

    parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write files; exit 1 if any file would change",
    )

    # Output options
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print a summary of the run to stdout",
    )

    parser.add_argument(
        "-f", "--format",
        choices=["text", "json"],
        default="text",
        help="Summary format when --verbose is given (default: text)",
    )

    parser.add_argument(
        "--max-workers",
        type=int,
        default=None,
        help="Maximum number of files processed at once (default: one per file)",
    )

    parsed = parser.parse_args(args)
    if parsed.max_workers is not None and parsed.max_workers < 1:
        parser.error("--max-workers must be at least 1")
    return parsed


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)

    report = process_paths(
        parsed.paths,
        write=not parsed.check,
        max_workers=parsed.max_workers,
    )

    if parsed.check:
        for path in sorted(report.modified):
            print(f"would rewrite: {path}", file=sys.stderr)

    if parsed.verbose:
        base = Path.cwd()
        if parsed.format == "json":
            print(to_json(report, base=base))
        else:
            print(to_text(report, base=base, show_unchanged=True))

    if report.has_failures():
        return 1
    if parsed.check and report.modified:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
