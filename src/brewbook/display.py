from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional

from .domain import CoffeeRecipe, Method, RecipeMeta, Temperature

PLACEHOLDER_IMAGE = "placeholder"

ImageResolver = Callable[[str], Optional[Any]]

METHOD_LABELS = {
    Method.ESPRESSO: "Espresso",
    Method.GRANULES: "Granules",
}
TEMPERATURE_LABELS = {
    Temperature.HOT: "Hot",
    Temperature.COLD: "Cold",
}

DEFAULT_META = RecipeMeta(minutes=6, calories=80)
RECIPE_META = {
    "americano": RecipeMeta(minutes=5, calories=15),
    "iced_americano": RecipeMeta(minutes=5, calories=15),
    "latte": RecipeMeta(minutes=7, calories=160),
    "iced_latte": RecipeMeta(minutes=6, calories=160),
    "espresso": RecipeMeta(minutes=3, calories=5),
}

NOT_FOUND_TEXT = "Recipe not found."
NO_VARIANT_TEXT = "No recipe for the selected method."


def list_image_name(recipe: CoffeeRecipe) -> str:
    return "hot_list" if recipe.temperature is Temperature.HOT else "cold_list"


def detail_image_name(recipe: CoffeeRecipe) -> str:
    return "hot_detail" if recipe.temperature is Temperature.HOT else "cold_detail"


def resolve_image(resolver: ImageResolver, recipe: CoffeeRecipe, context: str = "detail") -> Any:
    """Resolve the recipe image, falling back from list art to detail art to a placeholder."""
    names = [detail_image_name(recipe)]
    if context == "list":
        names.insert(0, list_image_name(recipe))
    for name in names:
        handle = resolver(name)
        if handle is not None:
            return handle
    return PLACEHOLDER_IMAGE


def subtitle(recipe: CoffeeRecipe) -> str:
    return f"{TEMPERATURE_LABELS[recipe.temperature]} espresso-based coffee"


def recipe_meta_for(recipe_id: str) -> RecipeMeta:
    return RECIPE_META.get(recipe_id, DEFAULT_META)


def format_summary(recipe: CoffeeRecipe) -> str:
    return f"{recipe.id}: {recipe.name} ({subtitle(recipe)})"


def format_recipe(recipe: CoffeeRecipe, method: Method, note: str = "") -> list[str]:
    meta = recipe_meta_for(recipe.id)
    lines = [
        recipe.name,
        f"{meta.minutes} min · {meta.calories} kcal · {METHOD_LABELS[method]}",
        "",
    ]

    variant = recipe.variant(method)
    if variant is None:
        lines.append(NO_VARIANT_TEXT)
    else:
        lines.append("Ingredients")
        lines.extend(f"- {item}" for item in variant.ingredients)
        lines.append("")
        lines.append("Steps")
        lines.extend(f"{idx}. {step}" for idx, step in enumerate(variant.steps, start=1))

    if recipe.general_tips:
        lines.append("")
        lines.append("General tips")
        lines.extend(f"- {tip}" for tip in recipe.general_tips)
    if variant is not None and variant.tips:
        lines.append("")
        lines.append("Method tip")
        lines.append(variant.tips)
    if note:
        lines.append("")
        lines.append("My recipe")
        lines.append(note)
    return lines
