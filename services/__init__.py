"""
Recipe services: import, tag cleanup, scaling, images, search index, fetching
"""

from .ingredient_index import extract_ingredient_names
from .recipe_images import (
    ImagePattern,
    detect_image_pattern,
    get_all_images,
    get_primary_image,
    get_step_images,
)
from .recipe_import import export_recipe, import_recipe
from .recipe_scaling import scale_factor_for_servings, scale_recipe
from .tag_sanitizer import (
    ingredient_tokens,
    normalize_tag,
    repair_recipe_tags,
    sanitize_recipe_tags,
    sanitize_tags,
)

__all__ = [
    'extract_ingredient_names',
    'ImagePattern',
    'detect_image_pattern',
    'get_all_images',
    'get_primary_image',
    'get_step_images',
    'export_recipe',
    'import_recipe',
    'scale_factor_for_servings',
    'scale_recipe',
    'ingredient_tokens',
    'normalize_tag',
    'repair_recipe_tags',
    'sanitize_recipe_tags',
    'sanitize_tags',
]
