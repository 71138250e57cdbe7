from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class Temperature(str, Enum):
    HOT = "hot"
    COLD = "cold"


class Method(str, Enum):
    ESPRESSO = "espresso"
    GRANULES = "granules"


class Difficulty(int, Enum):
    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class RecipeVariant:
    ingredients: tuple[str, ...]
    steps: tuple[str, ...]
    tips: str = ""


@dataclass(frozen=True)
class CoffeeRecipe:
    id: str
    name: str
    temperature: Temperature
    variants: Mapping[Method, RecipeVariant]
    general_tips: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Read-only after construction.
        object.__setattr__(self, "variants", MappingProxyType(dict(self.variants)))
        object.__setattr__(self, "general_tips", tuple(self.general_tips))

    def variant(self, method: Method) -> RecipeVariant | None:
        return self.variants.get(method)


@dataclass(frozen=True)
class FilterState:
    selected_temperature: Temperature | None
    visible_recipes: tuple[CoffeeRecipe, ...]


@dataclass(frozen=True)
class RecipeMeta:
    minutes: int
    calories: int
