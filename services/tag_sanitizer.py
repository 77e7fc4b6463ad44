"""
Tag cleanup for imported recipes.

Scraped pages often put ingredient names into keywords ("chicken, garlic,
weeknight"). Tags that merely repeat an ingredient are dropped, along with
tags too short to mean anything and duplicates.
"""

import logging
import re
from typing import Any, Callable, Dict, Iterable, List, Optional, Set, Tuple

from models.recipe import Recipe, StructuredIngredient, TextIngredient, as_ingredient

logger = logging.getLogger(__name__)

EventCallback = Callable[[str, Dict[str, Any]], None]

MIN_TAG_LENGTH = 3

_NON_WORD_RE = re.compile(r"[^\w]", re.UNICODE)
_SPLIT_RE = re.compile(r"[,\s]+")


def normalize_tag(value: str) -> str:
    """Lowercased, trimmed, non-word characters removed"""
    return _NON_WORD_RE.sub("", (value or "").strip().lower())


def _text_tokens(text: str) -> Set[str]:
    tokens = set()
    for part in _SPLIT_RE.split((text or "").lower()):
        token = _NON_WORD_RE.sub("", part)
        if len(token) >= MIN_TAG_LENGTH and not token.isnumeric():
            tokens.add(token)
    return tokens


def ingredient_tokens(ingredients: Iterable[Any]) -> Set[str]:
    """Words a tag may not repeat, gathered from every ingredient"""
    tokens: Set[str] = set()
    for raw in ingredients:
        ingredient = as_ingredient(raw)
        if isinstance(ingredient, TextIngredient):
            tokens |= _text_tokens(ingredient.text)
        elif isinstance(ingredient, StructuredIngredient):
            if ingredient.name:
                name = normalize_tag(ingredient.name)
                if len(name) >= MIN_TAG_LENGTH:
                    tokens.add(name)
            else:
                tokens |= _text_tokens(ingredient.item)
    return tokens


def sanitize_tags(
    tags: Optional[Iterable[str]],
    ingredients: Iterable[Any],
    on_event: Optional[EventCallback] = None,
) -> Optional[List[str]]:
    """
    Drop tags that are ingredient words, too short, or duplicates.

    Args:
        tags: Tags as found on the recipe (None or empty means no tags)
        ingredients: Text or structured ingredients, models or raw values
        on_event: Optional callback receiving ("tags_sanitized", fields)

    Returns:
        The kept tags in original order and spelling, or None when none remain
    """
    if not tags:
        return None

    tokens = ingredient_tokens(ingredients)
    kept: List[str] = []
    seen: Set[str] = set()
    dropped = 0

    for tag in tags:
        normalized = normalize_tag(tag)
        if len(normalized) < MIN_TAG_LENGTH or normalized in tokens or normalized in seen:
            dropped += 1
            continue
        seen.add(normalized)
        kept.append(tag)

    if dropped:
        logger.debug(f"Dropped {dropped} tag(s), kept {len(kept)}")
    if on_event is not None:
        on_event("tags_sanitized", {"kept": len(kept), "dropped": dropped})

    return kept or None


def sanitize_recipe_tags(recipe: Recipe, on_event: Optional[EventCallback] = None) -> Recipe:
    """Copy of the recipe with its tags sanitized"""
    tags = sanitize_tags(recipe.tags, recipe.ingredients, on_event=on_event)
    if tags == recipe.tags:
        return recipe
    return recipe.model_copy(update={"tags": tags})


def repair_recipe_tags(recipes: Iterable[Recipe]) -> Tuple[List[Recipe], int]:
    """
    Re-run the sanitizer over stored recipes.

    Returns the (possibly updated) recipes and how many of them changed.
    Running it twice changes nothing the second time.
    """
    repaired: List[Recipe] = []
    changed = 0
    for recipe in recipes:
        cleaned = sanitize_recipe_tags(recipe)
        if cleaned is not recipe:
            changed += 1
        repaired.append(cleaned)

    if changed:
        logger.debug(f"Repaired tags on {changed} recipe(s)")
    return repaired, changed
