from __future__ import annotations

from ..display import METHOD_LABELS, PLACEHOLDER_IMAGE, TEMPERATURE_LABELS, resolve_image, subtitle
from ..domain import CoffeeRecipe, Method, Temperature

# Text stand-ins for the hot/cold list and detail pictures.
IMAGE_ART = {
    "hot_list": "♨",
    "cold_list": "❄",
    "hot_detail": "  ( (\n   ) )\n ........\n |      |]\n \\      /\n  `----'",
    "cold_detail": "  ______\n |  ::  |\n |::  ::|\n |  ::  |\n  \\____/",
}
PLACEHOLDER_ART = "[ ]"


def resolve_art(name: str) -> str | None:
    return IMAGE_ART.get(name)


def recipe_row_label(recipe: CoffeeRecipe, art: str) -> str:
    return f"{art}  {recipe.name}  ·  {subtitle(recipe)}"


def filter_button_label(temperature: Temperature, selected: Temperature | None) -> str:
    marker = "●" if temperature is selected else "○"
    return f"{marker} {TEMPERATURE_LABELS[temperature]}"


def method_button_label(method: Method, selected: Method) -> str:
    marker = "●" if method is selected else "○"
    return f"{marker} {METHOD_LABELS[method]}"


def art_for(recipe: CoffeeRecipe, context: str) -> str:
    art = resolve_image(resolve_art, recipe, context=context)
    if art == PLACEHOLDER_IMAGE:
        return PLACEHOLDER_ART
    return str(art)
