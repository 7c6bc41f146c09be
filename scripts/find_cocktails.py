#!/usr/bin/env python3
"""
Find cocktails by ingredient, or list the ingredients matching a query.

Usage:
    python find_cocktails.py --ingredient vodka --ingredient rum
    python find_cocktails.py --ingredient gin --ingredient lime --match all
    python find_cocktails.py --query syrup
"""

import argparse
import logging
import sys
from collections.abc import Mapping

from cocktail_analysis.ingredients import (
    extract_unique_ingredients,
    filter_ingredients_by_query,
    find_cocktails,
)
from cocktail_analysis.records import Cocktail, load_cocktails


def main():
    """Main function."""
    parser = argparse.ArgumentParser(description="Search cocktails by ingredient")
    parser.add_argument(
        "--input",
        type=str,
        default="static/cocktails.json",
        help="Path to the cocktails JSON file",
    )
    parser.add_argument(
        "--ingredient",
        action="append",
        default=[],
        help="Ingredient (or part of a name) to search for; repeatable",
    )
    parser.add_argument(
        "--match",
        type=str,
        choices=["all", "any"],
        default="any",
        help="Require any of the ingredients or all of them (default: any)",
    )
    parser.add_argument(
        "--query",
        type=str,
        default=None,
        help="List ingredient names containing this text instead of cocktails",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.WARNING, format="%(asctime)s - %(levelname)s - %(message)s"
    )

    try:
        cocktails = load_cocktails(args.input)
    except (OSError, ValueError) as e:
        print(f"Error loading cocktails from {args.input}: {e}")
        sys.exit(1)

    if args.query is not None:
        ingredients = filter_ingredients_by_query(
            extract_unique_ingredients(cocktails), args.query
        )
        if not ingredients:
            print(f"No ingredients found matching '{args.query}'.")
        for ingredient in ingredients:
            print(ingredient)
        return

    matches = [
        record
        for record in find_cocktails(cocktails, args.ingredient, match=args.match)
        if isinstance(record, Mapping)
    ]
    selected = ", ".join(args.ingredient)
    if not matches:
        if args.ingredient:
            print(f"No cocktails found with the selected ingredients: {selected}")
        else:
            print("Select ingredients to find cocktails you can make!")
        return

    header = f"Found {len(matches)} cocktail{'' if len(matches) == 1 else 's'}"
    if args.ingredient:
        header += f" with: {selected}"
    print(header)
    for record in matches:
        cocktail = Cocktail.from_dict(record)
        print(f"\n{cocktail.name}")
        for entry in cocktail.ingredients:
            print(f"  - {entry.display_text()}")


if __name__ == "__main__":
    main()
