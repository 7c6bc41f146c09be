"""Data model for cocktail records and their ingredient entries."""

import dataclasses
import enum
import math
import numbers
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple, Union


class AmountShape(str, enum.Enum):
    """Shape tags recorded in the ``amount_types`` statistic."""

    NUMBER = "number"
    STRING = "string"
    SPECIAL = "special"


@dataclasses.dataclass(frozen=True)
class NumericAmount:
    value: Union[int, float]

    @property
    def shape(self) -> Optional[AmountShape]:
        # Zero and NaN amounts are indistinguishable from "no amount"
        if not self.value or math.isnan(self.value):
            return None
        return AmountShape.NUMBER

    def __str__(self) -> str:
        if isinstance(self.value, float) and self.value.is_integer():
            return str(int(self.value))
        return repr(self.value)


@dataclasses.dataclass(frozen=True)
class TextAmount:
    text: str

    @property
    def shape(self) -> Optional[AmountShape]:
        return AmountShape.STRING if self.text else None

    def __str__(self) -> str:
        return self.text


Amount = Union[NumericAmount, TextAmount]


def parse_amount(value: Any) -> Optional[Amount]:
    """Wrap a literal ``amount`` value in its variant.

    Args:
        value: The raw JSON value of the ``amount`` field.

    Returns:
        A NumericAmount or TextAmount carrying the original literal, or None
        when the value is absent or neither a number nor a string.

    Examples:
        >>> parse_amount(4.5)
        NumericAmount(value=4.5)
        >>> parse_amount("2 dashes")
        TextAmount(text='2 dashes')
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        return NumericAmount(value)
    if isinstance(value, str):
        return TextAmount(value)
    return None


def _clean_name(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    name = value.strip()
    return name or None


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


@dataclasses.dataclass(frozen=True)
class IngredientEntry:
    """One line of a cocktail's ingredient list.

    Use ``IngredientEntry.from_dict`` to build the right variant from a JSON
    mapping. ``raw`` keeps the literal mapping for schema discovery.
    """

    name: Optional[str] = None
    unit: Optional[str] = None
    amount: Optional[Amount] = None
    label: Optional[str] = None
    raw: Mapping = dataclasses.field(default_factory=dict, compare=False)

    @property
    def fields(self) -> List[str]:
        """Sorted field names present in the literal entry."""
        return sorted(self.raw.keys())

    def amount_shapes(self) -> List[AmountShape]:
        shape = self.amount.shape if self.amount is not None else None
        return [shape] if shape else []

    def display_text(self) -> str:
        parts = []
        if self.amount is not None and self.amount.shape:
            parts.append(str(self.amount))
        if self.unit:
            parts.append(self.unit)
        title = self.label or self.name
        if title:
            parts.append(title)
        return " ".join(parts)

    @classmethod
    def from_dict(cls, data: Mapping) -> "IngredientEntry":
        """Build a MeasuredIngredient or SpecialIngredient from a JSON mapping.

        Args:
            data: Mapping with any of the keys ``ingredient``, ``unit``,
                ``amount``, ``label`` and ``special``.

        Returns:
            SpecialIngredient if ``special`` is set, MeasuredIngredient otherwise.

        Raises:
            TypeError: If ``data`` is not a mapping.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Ingredient entry must be a mapping, got {type(data).__name__}")

        common = dict(
            name=_clean_name(data.get("ingredient")),
            unit=_optional_str(data.get("unit")),
            amount=parse_amount(data.get("amount")),
            label=_optional_str(data.get("label")),
            raw=data,
        )
        special = _optional_str(data.get("special"))
        if special:
            return SpecialIngredient(special=special, **common)
        return MeasuredIngredient(**common)


@dataclasses.dataclass(frozen=True)
class MeasuredIngredient(IngredientEntry):
    """A named ingredient with an optional amount, unit and display label."""


@dataclasses.dataclass(frozen=True)
class SpecialIngredient(IngredientEntry):
    """A free-text instruction such as "Few dashes plain water".

    The instruction replaces unit, amount and name when displayed.
    """

    special: str = ""

    def amount_shapes(self) -> List[AmountShape]:
        return super().amount_shapes() + [AmountShape.SPECIAL]

    def display_text(self) -> str:
        return self.special


@dataclasses.dataclass
class Cocktail:
    """A cocktail record. Metadata other than name and ingredients is pass-through."""

    name: str
    ingredients: Tuple[IngredientEntry, ...] = ()
    iba: bool = False
    colors: Union[str, List[str], None] = None
    glass: Optional[str] = None
    category: Optional[str] = None
    garnish: Optional[str] = None
    preparation: Optional[str] = None

    def ingredient_names(self) -> List[str]:
        return [entry.name for entry in self.ingredients if entry.name]

    @classmethod
    def from_dict(cls, data: Mapping) -> "Cocktail":
        """Build a Cocktail from a record mapping.

        Non-mapping entries in ``ingredients`` are dropped.

        Raises:
            TypeError: If ``data`` is not a mapping.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Cocktail record must be a mapping, got {type(data).__name__}")

        raw_ingredients = data.get("ingredients")
        if not isinstance(raw_ingredients, list):
            raw_ingredients = []

        return cls(
            name=data.get("name") or "",
            ingredients=tuple(
                IngredientEntry.from_dict(item)
                for item in raw_ingredients
                if isinstance(item, Mapping)
            ),
            iba=bool(data.get("iba", False)),
            colors=data.get("colors"),
            glass=data.get("glass"),
            category=data.get("category"),
            garnish=data.get("garnish"),
            preparation=data.get("preparation"),
        )
