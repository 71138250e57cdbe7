from __future__ import annotations

from collections.abc import Iterable
import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from .domain import CoffeeRecipe, Method, RecipeVariant, Temperature, build_variant
from .errors import CatalogError, RecipeNotFoundError

log = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "catalog.yaml"


class Catalog:
    """Immutable, ordered collection of decorated recipes."""

    def __init__(self, recipes: Iterable[CoffeeRecipe]) -> None:
        self._recipes = tuple(recipes)
        self._by_id: dict[str, CoffeeRecipe] = {}
        for recipe in self._recipes:
            if recipe.id in self._by_id:
                raise CatalogError(f"Duplicate recipe id {recipe.id!r}")
            if not recipe.variants:
                raise CatalogError(f"Recipe {recipe.id!r} has no variants")
            self._by_id[recipe.id] = recipe

    def list_all(self) -> tuple[CoffeeRecipe, ...]:
        return self._recipes

    def find_by_id(self, recipe_id: str) -> CoffeeRecipe:
        recipe = self._by_id.get(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(f"Recipe not found: {recipe_id!r}")
        return recipe

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self):
        return iter(self._recipes)


def load_catalog(path: Optional[str | Path] = None) -> Catalog:
    source = Path(path) if path else DEFAULT_CATALOG_PATH
    data = _load_yaml(source)
    entries = data.get("recipes")
    if not isinstance(entries, list) or not entries:
        raise CatalogError(f"{source}: 'recipes' must be a non-empty list")

    recipes = [parse_recipe(entry, str(source)) for entry in entries]
    catalog = Catalog(recipes)
    log.debug("Loaded %d recipes from %s", len(catalog), source)
    return catalog


def parse_recipe(entry: Any, source_path: str) -> CoffeeRecipe:
    if not isinstance(entry, dict):
        raise CatalogError(f"{source_path}: recipe entries must be mappings")

    recipe_id = _required_text(entry, "id", source_path, "<unknown>")
    where = f"{source_path}: recipe {recipe_id!r}"
    name = _required_text(entry, "name", source_path, recipe_id)

    try:
        temperature = Temperature(str(entry.get("temperature", "")).strip().lower())
    except ValueError as exc:
        raise CatalogError(f"{where}: unknown temperature {entry.get('temperature')!r}") from exc

    raw_variants = entry.get("variants")
    if not isinstance(raw_variants, dict) or not raw_variants:
        raise CatalogError(f"{where}: at least one variant is required")

    variants: dict[Method, RecipeVariant] = {}
    for key, body in raw_variants.items():
        method = _parse_method(key, where)
        if method in variants:
            raise CatalogError(f"{where}: duplicate variant {method.value!r}")
        variants[method] = _parse_variant(method, body, where)

    general_tips = _string_list(entry.get("general_tips", []), f"{where}: general_tips")
    return CoffeeRecipe(
        id=recipe_id,
        name=name,
        temperature=temperature,
        variants=variants,
        general_tips=tuple(general_tips),
    )


def _parse_variant(method: Method, body: Any, where: str) -> RecipeVariant:
    if body is None:
        body = {}
    if not isinstance(body, dict):
        raise CatalogError(f"{where}: variant {method.value!r} must be a mapping")
    label = f"{where}: {method.value}"
    ingredients = _string_list(body.get("ingredients", []), f"{label} ingredients")
    steps = _string_list(body.get("steps", []), f"{label} steps")
    tips = body.get("tips") or ""
    return build_variant(method, ingredients, steps, str(tips))


def _parse_method(key: Any, where: str) -> Method:
    text = str(key or "").strip().lower()
    try:
        return Method(text)
    except ValueError as exc:
        raise CatalogError(f"{where}: unknown method {key!r}") from exc


def _required_text(entry: dict[str, Any], key: str, source_path: str, recipe_id: str) -> str:
    value = entry.get(key)
    text = "" if value is None else str(value).strip()
    if not text:
        raise CatalogError(f"{source_path}: recipe {recipe_id!r} missing {key!r}")
    return text


def _string_list(value: Any, where: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise CatalogError(f"{where} must be a list")
    return [str(item) for item in value]


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Failed to read catalog: {path}") from exc
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise CatalogError(f"Invalid YAML in catalog: {path}") from exc
    if not isinstance(data, dict):
        raise CatalogError(f"{path}: catalog must be a mapping")
    return data
