from .derive import (
    build_variant,
    decorate_ingredients,
    infer_difficulty,
    infer_equipment,
    normalize_steps,
    normalize_tips,
)
from .models import (
    CoffeeRecipe,
    Difficulty,
    FilterState,
    Method,
    RecipeMeta,
    RecipeVariant,
    Temperature,
)

__all__ = [
    "CoffeeRecipe",
    "Difficulty",
    "FilterState",
    "Method",
    "RecipeMeta",
    "RecipeVariant",
    "Temperature",
    "build_variant",
    "decorate_ingredients",
    "infer_difficulty",
    "infer_equipment",
    "normalize_steps",
    "normalize_tips",
]
