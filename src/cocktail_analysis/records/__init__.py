"""Cocktail record model and loading utilities."""

from .loading import ensure_record_collection, load_cocktails, parse_cocktails_json
from .models import (
    AmountShape,
    Cocktail,
    IngredientEntry,
    MeasuredIngredient,
    NumericAmount,
    SpecialIngredient,
    TextAmount,
    parse_amount,
)

__all__ = [
    "AmountShape",
    "Cocktail",
    "IngredientEntry",
    "MeasuredIngredient",
    "NumericAmount",
    "SpecialIngredient",
    "TextAmount",
    "parse_amount",
    "ensure_record_collection",
    "load_cocktails",
    "parse_cocktails_json",
]
