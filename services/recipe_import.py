"""
Recipe import / export for the stored document format.
"""

import json
import logging
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from exceptions import InvalidRecipeError
from models.recipe import Recipe, Source
from .tag_sanitizer import EventCallback, sanitize_recipe_tags

logger = logging.getLogger(__name__)


def _missing_fields(document: Dict[str, Any]) -> list:
    missing = []
    name = document.get("name")
    if not isinstance(name, str) or not name.strip():
        missing.append("name")
    if not document.get("ingredients"):
        missing.append("ingredients")
    return missing


def import_recipe(
    payload: Union[str, Dict[str, Any], Recipe],
    source_url: Optional[str] = None,
    on_event: Optional[EventCallback] = None,
) -> Recipe:
    """
    Validate a recipe document and return it with sanitized tags.

    Args:
        payload: JSON text, a plain document dict or an existing Recipe
        source_url: Recorded as the recipe source when it has none
        on_event: Optional callback forwarded to the tag sanitizer

    Raises:
        InvalidRecipeError: Missing name or ingredients, or a malformed document
    """
    if isinstance(payload, Recipe):
        recipe = payload
    else:
        if isinstance(payload, str):
            try:
                payload = json.loads(payload)
            except json.JSONDecodeError as e:
                raise InvalidRecipeError([], detail=f"not valid JSON: {e.msg}") from e

        if not isinstance(payload, dict):
            raise InvalidRecipeError([], detail="recipe document must be an object")

        missing = _missing_fields(payload)
        if missing:
            raise InvalidRecipeError(missing)

        try:
            recipe = Recipe.model_validate(payload)
        except ValidationError as e:
            raise InvalidRecipeError([], detail=f"{e.error_count()} validation error(s)") from e

    if source_url and recipe.source is None:
        recipe = recipe.model_copy(update={"source": Source(url=source_url)})

    logger.debug(f"Importing recipe '{recipe.name}' with {len(recipe.ingredients)} ingredient(s)")
    return sanitize_recipe_tags(recipe, on_event=on_event)


def export_recipe(recipe: Recipe) -> Dict[str, Any]:
    """Plain stored document for a recipe"""
    return recipe.to_document()
