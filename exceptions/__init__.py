"""
Exceptions module exports
"""

from .recipe_exceptions import (
    RecipeError,
    InvalidRecipeError,
    RecipeFetchError
)

__all__ = [
    'RecipeError',
    'InvalidRecipeError',
    'RecipeFetchError'
]
