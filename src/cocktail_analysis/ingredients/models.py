import dataclasses
from typing import Any, Dict, List


@dataclasses.dataclass
class IngredientFrequency:
    ingredient: str
    count: int


@dataclasses.dataclass
class IngredientStructure:
    structure: List[str]  # sorted field names
    example: Any  # literal entry value


@dataclasses.dataclass
class StructureSample:
    cocktail_name: str
    ingredients: List[IngredientStructure]


@dataclasses.dataclass
class IngredientStats:
    total_ingredients: int = 0
    average_ingredients_per_cocktail: float = 0.0
    ingredient_frequency: Dict[str, int] = dataclasses.field(default_factory=dict)
    unit_types: List[str] = dataclasses.field(default_factory=list)
    amount_types: List[str] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class IngredientAnalysis:
    unique_ingredients: List[str]
    total_unique_ingredients: int
    structure_samples: List[StructureSample]
    stats: IngredientStats

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)
