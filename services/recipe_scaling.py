import logging
import math
from typing import List, Optional

from models.extraction import ScaledIngredientLine
from models.recipe import Recipe
from scaling import render_ingredients

logger = logging.getLogger(__name__)


def scale_factor_for_servings(recipe: Recipe, target_servings: Optional[float]) -> float:
    """
    target / base servings.

    Falls back to 1 when the recipe declares no servings or the target is
    not a positive number.
    """
    base = recipe.servings
    if not base or target_servings is None:
        return 1.0
    if not math.isfinite(target_servings) or target_servings <= 0:
        return 1.0
    return target_servings / base


def scale_recipe(recipe: Recipe, factor: float) -> List[ScaledIngredientLine]:
    """One display line per ingredient, in recipe order"""
    lines = render_ingredients(recipe.ingredients, factor)
    logger.debug(f"Scaled '{recipe.name}' by {factor}: {sum(line.scaled for line in lines)}/{len(lines)} lines scaled")
    return lines
