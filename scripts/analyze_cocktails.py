#!/usr/bin/env python3
"""
Analyze the ingredients of a cocktails JSON collection.
Prints a summary to the console and saves the full report as JSON,
optionally with a CSV table of ingredient frequencies and categories.
"""

import argparse
import logging
import sys

from cocktail_analysis.records import load_cocktails
from cocktail_analysis.report import (
    DEFAULT_REPORT_FILE,
    REPORT_TOP_N,
    format_report_lines,
    frequency_table,
    get_complete_ingredient_analysis,
    write_report,
)


def main():
    """Main function."""
    parser = argparse.ArgumentParser(
        description="Analyze cocktail ingredients and write a report"
    )
    parser.add_argument(
        "--input",
        type=str,
        default="static/cocktails.json",
        help="Path to the cocktails JSON file",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=DEFAULT_REPORT_FILE,
        help="Path of the JSON report to write",
    )
    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Optional path of a CSV ingredient frequency table",
    )
    parser.add_argument(
        "--top-n",
        type=int,
        default=REPORT_TOP_N,
        help=f"Number of most common ingredients to report (default: {REPORT_TOP_N})",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=5,
        help="Number of sample ingredient structures to print",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable info logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        cocktails = load_cocktails(args.input)
    except (OSError, ValueError) as e:
        print(f"Error loading cocktails from {args.input}: {e}")
        sys.exit(1)

    report = get_complete_ingredient_analysis(cocktails, top_n=args.top_n)
    for line in format_report_lines(report, sample_limit=args.samples):
        print(line)

    print("5. COMPLETE LIST OF UNIQUE INGREDIENTS:")
    for idx, ingredient in enumerate(report.unique_ingredients, start=1):
        print(f"   {idx}. {ingredient}")

    output_file = write_report(report, args.output)
    print(f"\nDetailed analysis saved to: {output_file}")

    if args.csv:
        frequency_table(report).to_csv(args.csv, index=False)
        print(f"Ingredient frequency table saved to: {args.csv}")


if __name__ == "__main__":
    main()
