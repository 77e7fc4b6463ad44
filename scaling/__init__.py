"""
Ingredient scaling: per-policy quantity scaling, fraction formatting and
display-line rendering.
"""

from .fraction_formatter import format_quantity, parse_quantity
from .quantity_scaler import is_identity_factor, scale_quantity, snap_to_values
from .ingredient_renderer import (
    extract_ingredient_name,
    render_ingredient,
    render_ingredients,
    scale_free_text,
)

__all__ = [
    'format_quantity',
    'parse_quantity',
    'is_identity_factor',
    'scale_quantity',
    'snap_to_values',
    'extract_ingredient_name',
    'render_ingredient',
    'render_ingredients',
    'scale_free_text',
]
