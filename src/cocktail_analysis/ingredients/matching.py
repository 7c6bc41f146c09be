"""Substring search over ingredient names and cocktails."""

from collections.abc import Mapping
from typing import Any, Iterable, List, Sequence

from cocktail_analysis.records import ensure_record_collection

from .extraction import parse_entry

MATCH_MODES = ("all", "any")


def _cocktail_ingredient_names(cocktail: Any) -> List[str]:
    """Lower-cased names of a cocktail's named entries."""
    ingredients = cocktail.get("ingredients") if isinstance(cocktail, Mapping) else None
    if not isinstance(ingredients, list):
        return []
    names = []
    for item in ingredients:
        entry = parse_entry(item)
        if entry is not None and entry.name:
            names.append(entry.name.lower())
    return names


def _contains(names: List[str], target: str) -> bool:
    return any(target in name for name in names)


def find_cocktails_by_all_ingredients(
    cocktails: Sequence, target_ingredients: Iterable[str]
) -> List[Any]:
    """Find cocktails containing every target ingredient.

    A target matches an entry when it is a case-insensitive substring of the
    entry's name, so "lime" matches "Lime juice".

    Args:
        cocktails: List of cocktail record mappings.
        target_ingredients: Ingredient names or name fragments.

    Returns:
        The matching cocktails in input order. With no targets every cocktail
        is returned.

    Raises:
        TypeError: If ``cocktails`` is not a list of cocktails.
    """
    ensure_record_collection(cocktails)
    targets = [target.lower() for target in target_ingredients]
    if not targets:
        return list(cocktails)

    matches = []
    for cocktail in cocktails:
        names = _cocktail_ingredient_names(cocktail)
        if all(_contains(names, target) for target in targets):
            matches.append(cocktail)
    return matches


def find_cocktails_by_any_ingredient(
    cocktails: Sequence, target_ingredients: Iterable[str]
) -> List[Any]:
    """Find cocktails containing at least one target ingredient.

    Same matching rules as ``find_cocktails_by_all_ingredients``.
    """
    ensure_record_collection(cocktails)
    targets = [target.lower() for target in target_ingredients]
    if not targets:
        return list(cocktails)

    matches = []
    for cocktail in cocktails:
        names = _cocktail_ingredient_names(cocktail)
        if any(_contains(names, target) for target in targets):
            matches.append(cocktail)
    return matches


def find_cocktails(
    cocktails: Sequence, target_ingredients: Iterable[str], match: str = "all"
) -> List[Any]:
    """Filter cocktails by ingredients using "all" or "any" matching.

    Raises:
        ValueError: If ``match`` is not one of ``MATCH_MODES``.
    """
    if match == "all":
        return find_cocktails_by_all_ingredients(cocktails, target_ingredients)
    if match == "any":
        return find_cocktails_by_any_ingredient(cocktails, target_ingredients)
    raise ValueError(f"Unknown match mode: {match!r} (expected one of {MATCH_MODES})")


def filter_ingredients_by_query(ingredients: Iterable[str], query: str) -> List[str]:
    """Filter ingredient names by a free-text query.

    Examples:
        >>> filter_ingredients_by_query(["Gin", "Lime juice", "Vodka"], "IN")
        ['Gin']
    """
    ingredients = list(ingredients)
    if not query.strip():
        return ingredients

    query = query.lower()
    return [
        ingredient
        for ingredient in ingredients
        if ingredient and query in ingredient.lower()
    ]
