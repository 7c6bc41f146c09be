"""Frequency and structure statistics over a cocktail collection."""

import math
from collections.abc import Mapping
from typing import Sequence

from cocktail_analysis.records import ensure_record_collection

from .extraction import iter_cocktail_entries, parse_entry
from .models import (
    IngredientAnalysis,
    IngredientStats,
    IngredientStructure,
    StructureSample,
)

# Number of cocktails captured for schema discovery
MAX_STRUCTURE_SAMPLES = 10


def analyze_ingredients(cocktails: Sequence) -> IngredientAnalysis:
    """Analyze ingredient structure and usage across a cocktail collection.

    Every entry of every well-formed cocktail counts toward
    ``total_ingredients``, including special-only entries. Frequencies count
    entries, so a cocktail listing "Gin" twice adds two. Amount shapes are
    only recorded for truthy amounts: ``0`` and ``""`` register nothing while
    ``"0"`` registers ``"string"``. An entry with ``special`` always adds the
    ``"special"`` shape.

    Args:
        cocktails: List of cocktail record mappings.

    Returns:
        IngredientAnalysis with the sorted vocabulary, up to
        ``MAX_STRUCTURE_SAMPLES`` structure samples and aggregate statistics.
        The average is ``nan`` for an empty collection.

    Raises:
        TypeError: If ``cocktails`` is not a list of cocktails.
    """
    ensure_record_collection(cocktails)

    unique_ingredients = set()
    structure_samples = []
    ingredient_frequency = {}
    unit_types = {}
    amount_types = {}
    total_ingredients = 0

    for _, cocktail, ingredients in iter_cocktail_entries(cocktails):
        if len(structure_samples) < MAX_STRUCTURE_SAMPLES:
            structure_samples.append(
                StructureSample(
                    cocktail_name=cocktail.get("name") or "",
                    ingredients=[
                        IngredientStructure(
                            structure=(
                                sorted(item.keys()) if isinstance(item, Mapping) else []
                            ),
                            example=item,
                        )
                        for item in ingredients
                    ],
                )
            )

        for item in ingredients:
            total_ingredients += 1
            entry = parse_entry(item)
            if entry is None:
                continue

            if entry.name:
                unique_ingredients.add(entry.name)
                ingredient_frequency[entry.name] = (
                    ingredient_frequency.get(entry.name, 0) + 1
                )

            if entry.unit:
                unit_types.setdefault(entry.unit, None)

            for shape in entry.amount_shapes():
                amount_types.setdefault(shape.value, None)

    if len(cocktails):
        average = total_ingredients / len(cocktails)
    else:
        average = math.nan

    stats = IngredientStats(
        total_ingredients=total_ingredients,
        average_ingredients_per_cocktail=average,
        ingredient_frequency=ingredient_frequency,
        unit_types=list(unit_types),
        amount_types=list(amount_types),
    )

    return IngredientAnalysis(
        unique_ingredients=sorted(unique_ingredients),
        total_unique_ingredients=len(unique_ingredients),
        structure_samples=structure_samples,
        stats=stats,
    )
