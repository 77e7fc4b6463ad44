"""
Image helpers for recipe display.

A recipe can carry a hero image (recipe.image), per-step images on structured
instructions, both, or neither.
"""

from enum import Enum
from typing import Dict, List, Optional

from models.recipe import Recipe, StructuredInstruction


class ImagePattern(str, Enum):
    hero = "hero"
    step_by_step = "step-by-step"
    hybrid = "hybrid"
    none = "none"


def get_step_images(recipe: Recipe) -> Dict[int, str]:
    """Step index -> image url, for steps that have one"""
    return {
        index: instruction.image
        for index, instruction in enumerate(recipe.instructions)
        if isinstance(instruction, StructuredInstruction) and instruction.image
    }


def detect_image_pattern(recipe: Recipe) -> ImagePattern:
    has_recipe_image = bool(recipe.image)
    has_step_images = bool(get_step_images(recipe))

    if has_recipe_image and has_step_images:
        return ImagePattern.hybrid
    if has_recipe_image:
        return ImagePattern.hero
    if has_step_images:
        return ImagePattern.step_by_step
    return ImagePattern.none


def get_all_images(recipe: Recipe) -> List[str]:
    if not recipe.image:
        return []
    if isinstance(recipe.image, list):
        return list(recipe.image)
    return [recipe.image]


def get_primary_image(recipe: Recipe) -> Optional[str]:
    """First recipe image, if any"""
    images = get_all_images(recipe)
    return images[0] if images else None
