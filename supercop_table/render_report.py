#!/usr/bin/env python3
"""
Render the scalar-multiplication comparison table from supercop logs.

Usage:
    supercop-table RESULTS_DIR [--config report.json] [--output table.tex]
                               [--json results.json] [--charts charts/]
                               [--factor 1|1000]

Input:
    RESULTS_DIR/<hostname>/data for every allow-listed host

Output:
    LaTeX sidewaystable on stdout (or --output)
"""

import argparse
import sys
from pathlib import Path

from .collect import collect_results
from .config import get_default_config, load_config
from .errors import ReportError
from .render_table import render_document


def build_report(root, config):
    """(results dir, config) -> (matrix, document text)."""
    matrix = collect_results(root, config)
    return matrix, render_document(matrix, config)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="supercop-table",
        description="Render a LaTeX cycle-count table from supercop benchmark logs")
    parser.add_argument("root",
                        help="Directory with one <hostname>/data file per machine")
    parser.add_argument("--config", default=None,
                        help="JSON report configuration (default: built-in tables)")
    parser.add_argument("--output", default=None,
                        help="Write the table here instead of stdout")
    parser.add_argument("--json", default=None,
                        help="Also write the aggregate matrix as JSON")
    parser.add_argument("--charts", default=None,
                        help="Also write per-section bar charts (PNG) into this directory")
    parser.add_argument("--factor", type=int, choices=[1, 1000], default=None,
                        help="Display scale for cycle counts (default 1000, i.e. 'k')")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        if args.config:
            config = load_config(args.config, factor=args.factor)
        else:
            config = get_default_config(factor=args.factor or 1000)

        matrix, document = build_report(args.root, config)

        if args.output:
            output_file = Path(args.output)
            with open(output_file, 'w', encoding='utf-8') as f:
                f.write(document)
            print(f"Written: {output_file}", file=sys.stderr)
    except (ReportError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.output:
        sys.stdout.write(document)

    if args.json:
        from .export import write_results_json
        print(f"Written: {write_results_json(matrix, config, args.json)}", file=sys.stderr)

    if args.charts:
        from .generate_charts import generate_charts
        generate_charts(matrix, config, args.charts)
        print(f"\nAll charts saved to: {args.charts}", file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())
