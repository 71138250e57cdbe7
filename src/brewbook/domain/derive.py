from __future__ import annotations

from collections.abc import Iterable, Sequence

from .models import Difficulty, Method, RecipeVariant

SERVING = "1 portion"
FALLBACK_EQUIPMENT = "Basic kitchen equipment"

LONG_STEEP_MARKERS = ("12–18", "12-18")

# (method or None for any, trigger substrings, difficulty); first match wins.
DIFFICULTY_RULES: tuple[tuple[Method | None, tuple[str, ...], Difficulty], ...] = (
    (None, ("blender",), Difficulty.MEDIUM),
    (None, ("froth", "microfoam"), Difficulty.MEDIUM),
    (Method.ESPRESSO, ("25–30", "1:2", "grind"), Difficulty.MEDIUM),
)

# Independent trigger groups, evaluated in order.
EQUIPMENT_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("shot", "portafilter", "brew the espresso", "espresso shot"), ("Espresso machine",)),
    (("froth", "microfoam", "foam"), ("Milk frother",)),
    (("blender",), ("Blender",)),
)
LONG_STEEP_EQUIPMENT = ("Jar", "Filter/Cheesecloth")
SHAKE_RULE = (("shake", "shaker"), ("Shaker/Jar",))
GRANULES_EQUIPMENT = ("Cup/Mug", "Spoon")

ESPRESSO_STEP_REWRITES = {
    "Espresso.": "Prepare an espresso shot.",
    "Brew the espresso.": "Prepare an espresso shot (freshly ground preferred).",
}

GRANULES_OPENER = "dissolve the granules"
GRANULES_EXPANSION = (
    "Fully dissolve the granules in 30 ml warm/hot water (make a base).",
    "Once the base is ready, continue with the remaining steps.",
)
GRANULES_RECOMMENDATION = (
    "Tip: first fully dissolve the granules in 30 ml warm/hot water (prevents clumping)."
)
BASE_MARKER = "make a base"

BASE_WATER_TRIGGER = "30 ml water"
BASE_WATER_LINE = "30 ml warm/hot water (for the base)"

SOUR_BITTER_TIP = (
    "If it tastes sour: extend the time a little / grind finer. "
    "If it tastes bitter: shorten the time / grind coarser."
)


def build_variant(
    method: Method,
    ingredients: Sequence[str],
    steps: Sequence[str],
    tips: str = "",
) -> RecipeVariant:
    """Run raw author text for one method through the whole pipeline.

    Granule ingredients get the base-water rewrite before inference; steps are
    inferred on in their raw form and normalized afterwards.
    """
    raw_ingredients = list(ingredients)
    if method is Method.GRANULES:
        raw_ingredients = [_rewrite_base_water(line) for line in raw_ingredients]
    raw_steps = list(steps)
    return RecipeVariant(
        ingredients=tuple(decorate_ingredients(method, raw_ingredients, raw_steps)),
        steps=tuple(normalize_steps(method, raw_steps)),
        tips=normalize_tips(tips),
    )


def infer_difficulty(method: Method, ingredients: Sequence[str], steps: Sequence[str]) -> Difficulty:
    text = _haystack(ingredients, steps)
    if _is_long_steep(text):
        return Difficulty.MEDIUM
    for only_method, triggers, difficulty in DIFFICULTY_RULES:
        if only_method is not None and only_method is not method:
            continue
        if _contains_any(text, triggers):
            return difficulty
    return Difficulty.EASY


def infer_equipment(method: Method, ingredients: Sequence[str], steps: Sequence[str]) -> list[str]:
    text = _haystack(ingredients, steps)
    equipment: list[str] = []

    if method is Method.GRANULES:
        _extend_unique(equipment, GRANULES_EQUIPMENT)
    for triggers, names in EQUIPMENT_RULES:
        if _contains_any(text, triggers):
            _extend_unique(equipment, names)
    if _is_long_steep(text):
        _extend_unique(equipment, LONG_STEEP_EQUIPMENT)
    triggers, names = SHAKE_RULE
    if _contains_any(text, triggers):
        _extend_unique(equipment, names)

    if not equipment:
        equipment.append(FALLBACK_EQUIPMENT)
    return equipment


def decorate_ingredients(method: Method, ingredients: Sequence[str], steps: Sequence[str]) -> list[str]:
    difficulty = infer_difficulty(method, ingredients, steps)
    equipment = infer_equipment(method, ingredients, steps)
    header = [
        f"Serving: {SERVING}",
        f"Difficulty: {difficulty.label}",
        f"Equipment: {', '.join(equipment)}",
    ]
    return header + list(ingredients)


def normalize_steps(method: Method, steps: Sequence[str]) -> list[str]:
    if method is Method.ESPRESSO:
        return [ESPRESSO_STEP_REWRITES.get(step.strip(), step) for step in steps]
    return _normalize_granule_steps(steps)


def normalize_tips(tips: str) -> str:
    text = (tips or "").strip()
    if not text:
        return text
    lower = text.lower()
    if "sour" in lower and "bitter" in lower:
        return SOUR_BITTER_TIP
    return text


def _normalize_granule_steps(steps: Sequence[str]) -> list[str]:
    joined = " ".join(steps).lower()
    has_base = (
        "base" in joined
        or "fully dissolve" in joined
        or ("dissolve" in joined and "warm" in joined)
    )

    out: list[str] = []
    for step in steps:
        text = step.strip()
        if text.lower().startswith(GRANULES_OPENER):
            out.extend(GRANULES_EXPANSION)
        else:
            out.append(text)

    if not has_base and not any(BASE_MARKER in step.lower() for step in out):
        return [GRANULES_RECOMMENDATION] + out
    return out


def _rewrite_base_water(line: str) -> str:
    if BASE_WATER_TRIGGER in line.lower():
        return BASE_WATER_LINE
    return line


def _haystack(ingredients: Iterable[str], steps: Iterable[str]) -> str:
    return " ".join([*ingredients, *steps]).lower()


def _is_long_steep(text: str) -> bool:
    return _contains_any(text, LONG_STEEP_MARKERS) or ("hour" in text and "steep" in text)


def _contains_any(text: str, triggers: Iterable[str]) -> bool:
    return any(trigger in text for trigger in triggers)


def _extend_unique(target: list[str], names: Iterable[str]) -> None:
    for name in names:
        if name not in target:
            target.append(name)
