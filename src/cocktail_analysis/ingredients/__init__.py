"""Ingredient extraction, statistics, categorization and matching."""

from .categorization import (
    CATEGORY_KEYWORDS,
    CATEGORY_ORDER,
    categorize_ingredient,
    categorize_ingredients,
)
from .extraction import extract_unique_ingredients
from .matching import (
    filter_ingredients_by_query,
    find_cocktails,
    find_cocktails_by_all_ingredients,
    find_cocktails_by_any_ingredient,
)
from .models import (
    IngredientAnalysis,
    IngredientFrequency,
    IngredientStats,
    IngredientStructure,
    StructureSample,
)
from .statistics import MAX_STRUCTURE_SAMPLES, analyze_ingredients

__all__ = [
    "CATEGORY_KEYWORDS",
    "CATEGORY_ORDER",
    "MAX_STRUCTURE_SAMPLES",
    "categorize_ingredient",
    "categorize_ingredients",
    "extract_unique_ingredients",
    "analyze_ingredients",
    "filter_ingredients_by_query",
    "find_cocktails",
    "find_cocktails_by_all_ingredients",
    "find_cocktails_by_any_ingredient",
    "IngredientAnalysis",
    "IngredientFrequency",
    "IngredientStats",
    "IngredientStructure",
    "StructureSample",
]
