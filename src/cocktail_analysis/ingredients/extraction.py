"""Ingredient vocabulary extraction."""

import logging
from collections.abc import Mapping
from typing import Any, Iterator, List, Optional, Sequence, Tuple

from cocktail_analysis.records import IngredientEntry, ensure_record_collection

logger = logging.getLogger(__name__)


def parse_entry(item: Any) -> Optional[IngredientEntry]:
    """Return the entry variant for ``item``, or None if it is not a mapping."""
    if not isinstance(item, Mapping):
        logger.debug(f"Skipping ingredient entry that is not a mapping: {item!r}")
        return None
    return IngredientEntry.from_dict(item)


def iter_cocktail_entries(
    cocktails: Sequence,
) -> Iterator[Tuple[int, Mapping, List[Any]]]:
    """Yield ``(index, cocktail, raw_ingredients)`` for every well-formed cocktail.

    A cocktail whose ``ingredients`` field is missing or not a list is skipped
    with a warning naming its index.

    Raises:
        TypeError: If ``cocktails`` is not a list of cocktails.
    """
    ensure_record_collection(cocktails)
    for index, cocktail in enumerate(cocktails):
        ingredients = cocktail.get("ingredients") if isinstance(cocktail, Mapping) else None
        if not isinstance(ingredients, list):
            logger.warning(f"Cocktail at index {index} has invalid ingredients array")
            continue
        yield index, cocktail, ingredients


def extract_unique_ingredients(cocktails: Sequence) -> List[str]:
    """Extract all distinct ingredient names from a cocktail collection.

    Names are compared exactly after trimming, so "Gin" and "gin" are two
    vocabulary items. Entries carrying only a ``special`` instruction have no
    name and contribute nothing.

    Args:
        cocktails: List of cocktail record mappings.

    Returns:
        Distinct ingredient names sorted alphabetically (case-sensitive).

    Examples:
        >>> extract_unique_ingredients([{"ingredients": [{"ingredient": "Gin"}]}])
        ['Gin']
    """
    unique_ingredients = set()
    for _, _, ingredients in iter_cocktail_entries(cocktails):
        for item in ingredients:
            entry = parse_entry(item)
            if entry is not None and entry.name:
                unique_ingredients.add(entry.name)
    return sorted(unique_ingredients)
