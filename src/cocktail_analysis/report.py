"""Composed ingredient analysis reports and their output formats."""

import dataclasses
import json
import logging
import math
import pathlib
from typing import Any, Dict, List, Sequence, Union

import pandas as pd

from cocktail_analysis.ingredients import (
    IngredientFrequency,
    IngredientStats,
    StructureSample,
    analyze_ingredients,
    categorize_ingredient,
    categorize_ingredients,
)

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 10
REPORT_TOP_N = 20
DEFAULT_REPORT_FILE = "cocktail-analysis-results.json"


@dataclasses.dataclass
class IngredientReport:
    """Everything the batch report prints or saves."""

    total_cocktails: int
    total_unique_ingredients: int
    unique_ingredients: List[str]
    categorized_ingredients: Dict[str, List[str]]
    most_common_ingredients: List[IngredientFrequency]
    statistics: IngredientStats
    sample_structures: List[StructureSample]

    def to_dict(self) -> Dict[str, Any]:
        """Return the report in the shape of the JSON artifact."""
        statistics = dataclasses.asdict(self.statistics)
        return {
            "summary": {
                "total_cocktails": self.total_cocktails,
                "total_unique_ingredients": self.total_unique_ingredients,
                "average_ingredients_per_cocktail": (
                    self.statistics.average_ingredients_per_cocktail
                ),
                "total_ingredient_instances": self.statistics.total_ingredients,
            },
            "unique_ingredients": list(self.unique_ingredients),
            "categorized_ingredients": {
                category: list(names)
                for category, names in self.categorized_ingredients.items()
            },
            "most_common_ingredients": [
                dataclasses.asdict(item) for item in self.most_common_ingredients
            ],
            "statistics": statistics,
            "sample_structures": [
                dataclasses.asdict(sample) for sample in self.sample_structures
            ],
        }


def _most_common(
    ingredient_frequency: Dict[str, int], limit: int
) -> List[IngredientFrequency]:
    # sorted() is stable, so ties keep first-seen order
    ranked = sorted(ingredient_frequency.items(), key=lambda item: -item[1])
    return [IngredientFrequency(ingredient, count) for ingredient, count in ranked[:limit]]


def get_most_common_ingredients(
    cocktails: Sequence, limit: int = DEFAULT_TOP_N
) -> List[IngredientFrequency]:
    """Get the most common ingredients across all cocktails.

    Args:
        cocktails: List of cocktail record mappings.
        limit: Number of ingredients to return.

    Returns:
        IngredientFrequency items sorted by descending count. Ingredients with
        equal counts keep the order in which they were first seen.
    """
    analysis = analyze_ingredients(cocktails)
    return _most_common(analysis.stats.ingredient_frequency, limit)


def get_complete_ingredient_analysis(
    cocktails: Sequence, top_n: int = REPORT_TOP_N
) -> IngredientReport:
    """Run the full analysis: vocabulary, statistics, categories and top ingredients.

    Raises:
        TypeError: If ``cocktails`` is not a list of cocktails.
    """
    analysis = analyze_ingredients(cocktails)
    categorized = categorize_ingredients(analysis.unique_ingredients)
    most_common = _most_common(analysis.stats.ingredient_frequency, top_n)

    return IngredientReport(
        total_cocktails=len(cocktails),
        total_unique_ingredients=analysis.total_unique_ingredients,
        unique_ingredients=analysis.unique_ingredients,
        categorized_ingredients=categorized,
        most_common_ingredients=most_common,
        statistics=analysis.stats,
        sample_structures=analysis.structure_samples,
    )


def _finite_or_none(value: float):
    return value if math.isfinite(value) else None


def write_report(report: IngredientReport, path: Union[str, pathlib.Path]) -> pathlib.Path:
    """Save a report as pretty-printed JSON.

    A non-finite average (empty collection) is written as ``null``.

    Returns:
        The path written to.
    """
    data = report.to_dict()
    data["summary"]["average_ingredients_per_cocktail"] = _finite_or_none(
        data["summary"]["average_ingredients_per_cocktail"]
    )
    data["statistics"]["average_ingredients_per_cocktail"] = _finite_or_none(
        data["statistics"]["average_ingredients_per_cocktail"]
    )

    path = pathlib.Path(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    logger.info(f"Wrote analysis report to {path}")
    return path


def frequency_table(report: IngredientReport) -> pd.DataFrame:
    """Build a table of every ingredient with its usage count and category.

    Returns:
        DataFrame with columns ``ingredient``, ``count`` and ``category``,
        sorted by descending count and then by name.
    """
    frequency = report.statistics.ingredient_frequency
    df = pd.DataFrame(
        {
            "ingredient": list(frequency.keys()),
            "count": list(frequency.values()),
        },
        columns=["ingredient", "count"],
    )
    df["count"] = df["count"].astype(int)
    df["category"] = df["ingredient"].map(categorize_ingredient)
    df = df.sort_values(
        ["count", "ingredient"], ascending=[False, True], kind="mergesort"
    )
    return df.reset_index(drop=True)


def format_report_lines(report: IngredientReport, sample_limit: int = 5) -> List[str]:
    """Render the console summary of a report."""
    stats = report.statistics
    average = stats.average_ingredients_per_cocktail
    average_text = f"{average:.2f}" if math.isfinite(average) else "n/a"

    lines = [
        "=== COCKTAIL INGREDIENTS ANALYSIS ===",
        "",
        "1. BASIC STATISTICS:",
        f"   Total cocktails: {report.total_cocktails}",
        f"   Total unique ingredients: {report.total_unique_ingredients}",
        f"   Average ingredients per cocktail: {average_text}",
        f"   Total ingredient instances: {stats.total_ingredients}",
        "",
        "2. INGREDIENT STRUCTURE ANALYSIS:",
        f"   Unit types found: {', '.join(stats.unit_types)}",
        f"   Amount types found: {', '.join(stats.amount_types)}",
        "",
        "   Sample ingredient structures:",
    ]
    for sample in report.sample_structures[:sample_limit]:
        lines.append(f"   {sample.cocktail_name}:")
        for idx, ingredient in enumerate(sample.ingredients, start=1):
            lines.append(f"     {idx}. Fields: [{', '.join(ingredient.structure)}]")
            lines.append(
                f"        Example: {json.dumps(ingredient.example, ensure_ascii=False)}"
            )
        lines.append("")

    lines.append(f"3. MOST COMMON INGREDIENTS (Top {len(report.most_common_ingredients)}):")
    for idx, item in enumerate(report.most_common_ingredients, start=1):
        lines.append(f"   {idx}. {item.ingredient} ({item.count} cocktails)")

    lines.append("")
    lines.append("4. INGREDIENTS BY CATEGORY:")
    for category, ingredients in report.categorized_ingredients.items():
        lines.append(f"   {category.upper()} ({len(ingredients)}):")
        lines.extend(f"     - {ingredient}" for ingredient in ingredients)
        lines.append("")

    return lines
