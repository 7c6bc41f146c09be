"""Keyword-based categorization of ingredient names."""

from typing import Dict, Iterable, List

# Ordered keyword groups. The first group with a keyword contained in the
# lower-cased name wins.
CATEGORY_KEYWORDS = {
    "spirits": [
        "vodka",
        "gin",
        "rum",
        "whiskey",
        "tequila",
        "cognac",
        "brandy",
        "bourbon",
        "scotch",
        "pisco",
        "cachaca",
        "absinthe",
    ],
    "liqueurs": [
        "liqueur",
        "sec",
        "curaçao",
        "cointreau",
        "drambuie",
        "disaronno",
        "galliano",
        "kahlúa",
        "baileys",
        "créme",
        "crème",
        "maraschino",
        "aperol",
        "campari",
        "bénédictine",
    ],
    "juices": ["juice", "puree"],
    "syrups": ["syrup", "nectar", "honey"],
    "bitters": ["bitters"],
    "garnishes": ["twist", "slice", "wedge", "cherry", "olive", "mint"],
    "mixers": [
        "soda",
        "water",
        "cola",
        "beer",
        "ale",
        "champagne",
        "prosecco",
        "wine",
        "cream",
        "milk",
        "coffee",
        "tea",
    ],
}

OTHER_CATEGORY = "other"

CATEGORY_ORDER = tuple(CATEGORY_KEYWORDS) + (OTHER_CATEGORY,)


def _contains_any(text: str, terms: List[str]) -> bool:
    return any(term in text for term in terms)


def _matches_category(category: str, lower: str) -> bool:
    if _contains_any(lower, CATEGORY_KEYWORDS[category]):
        return True
    # Lime on its own is a garnish, lime juice is not
    if category == "garnishes":
        return "lime" in lower and "juice" not in lower
    return False


def categorize_ingredient(ingredient: str) -> str:
    """Return the category for a single ingredient name.

    Matching is plain substring containment on the lower-cased name, so
    "Ginger ale" lands in spirits because it contains "gin".

    Examples:
        >>> categorize_ingredient("Orange juice")
        'juices'
        >>> categorize_ingredient("Lime")
        'garnishes'
    """
    lower = ingredient.lower()
    for category in CATEGORY_KEYWORDS:
        if _matches_category(category, lower):
            return category
    return OTHER_CATEGORY


def categorize_ingredients(unique_ingredients: Iterable[str]) -> Dict[str, List[str]]:
    """Group ingredient names by category.

    Args:
        unique_ingredients: Ingredient names, usually the extracted vocabulary.

    Returns:
        Dict with every category of ``CATEGORY_ORDER`` as a key, in that order.
        Each name appears in exactly one list and names keep their input order.
    """
    categories = {category: [] for category in CATEGORY_ORDER}
    for ingredient in unique_ingredients:
        categories[categorize_ingredient(ingredient)].append(ingredient)
    return categories
