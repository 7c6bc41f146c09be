"""Cocktail Analysis - Ingredient vocabulary, statistics and search for cocktail collections."""

__version__ = "0.1.0"

from . import ingredients, records, report

__all__ = ["ingredients", "records", "report"]
