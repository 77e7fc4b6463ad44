"""
Ingredient display lines for a given scale factor.

Structured ingredients are composed from their quantity, unit, name and prep:

    {"item": "2 cups flour, sifted", "quantity": {"amount": 2, "unit": "cups"},
     "name": "flour", "prep": "sifted"}  x1.5  ->  "3 cups flour, sifted"

Free-text ingredients get their leading quantity rewritten in place:

    "1 1/2 cups sugar"  x2  ->  "3 cups sugar"
    "a pinch of salt"   x2  ->  unchanged, scaled=False
"""

import re
from typing import Iterable, List, Union

from models.extraction import ScaledIngredientLine
from models.recipe import (
    Ingredient,
    StructuredIngredient,
    TextIngredient,
    as_ingredient,
)
from .fraction_formatter import GLYPH_CLASS, format_quantity, parse_quantity
from .quantity_scaler import is_identity_factor, scale_quantity

# Leading token may be a whole number, decimal, fraction or glyph ("1½" too);
# following tokens of a mixed number must be fractions ("1 1/2", "2 ½").
# Thousands separators ("1,500") belong to the number and are dropped when parsing
_LEAD_TOKEN = rf"(?:\d|\.\d|[{GLYPH_CLASS}])(?:[\d./{GLYPH_CLASS}]|,(?=\d{{3}}(?!\d)))*"
_FRACTION_TOKEN = rf"(?:\d+/[\d./]*|[{GLYPH_CLASS}])"
_RUN = rf"{_LEAD_TOKEN}(?:[ \t]+{_FRACTION_TOKEN})*"
LEADING_QUANTITY_RE = re.compile(
    rf"^\s*(?P<low>{_RUN})(?:(?P<dash>[ \t]*[-–][ \t]*)(?P<high>{_RUN}))?"
)

# Measurement units stripped when deriving a name from the item text
# (longer units first to avoid partial matches)
UNITS = [
    # Volume
    'tablespoons', 'tablespoon', 'tbsps', 'tbsp', 'tbs',
    'teaspoons', 'teaspoon', 'tsps', 'tsp',
    'cups', 'cup',
    'fluid ounces', 'fluid ounce', 'fl oz',
    'ounces', 'ounce', 'oz',
    'pints', 'pint', 'quarts', 'quart', 'gallons', 'gallon',
    'liters', 'liter', 'litres', 'litre',
    'milliliters', 'milliliter', 'millilitres', 'millilitre', 'ml', 'l',

    # Weight
    'pounds', 'pound', 'lbs', 'lb',
    'kilograms', 'kilogram', 'kg',
    'grams', 'gram', 'g',

    # Container/package units
    'cans', 'can', 'jars', 'jar', 'packages', 'package', 'pkg',

    # Piece units
    'pieces', 'piece', 'slices', 'slice', 'cloves', 'clove',
    'sprigs', 'sprig', 'bunches', 'bunch', 'pinches', 'pinch', 'dashes', 'dash',
]
UNITS_PATTERN = '|'.join(re.escape(unit) for unit in UNITS)
_UNIT_RE = re.compile(rf"^({UNITS_PATTERN})\.?(?=\s|$|,)", re.IGNORECASE)
_OF_RE = re.compile(r"^of\s+", re.IGNORECASE)


def extract_ingredient_name(item: str) -> str:
    """
    Best-effort ingredient name from its full text.

    "2 cups all-purpose flour, sifted" -> "all-purpose flour"
    """
    text = (item or "").strip()
    match = LEADING_QUANTITY_RE.match(text)
    if match:
        text = text[match.end():].strip()

    unit_match = _UNIT_RE.match(text)
    if unit_match:
        text = text[unit_match.end():].strip()

    text = _OF_RE.sub("", text)
    return text.split(",", 1)[0].strip()


def _render_structured(ingredient: StructuredIngredient, factor: float) -> ScaledIngredientLine:
    if ingredient.quantity is None:
        return ScaledIngredientLine(text=ingredient.item, scaled=False)

    amount = scale_quantity(ingredient.quantity.amount, ingredient.scaling, factor)
    parts = [format_quantity(amount)]
    if ingredient.quantity.unit:
        parts.append(ingredient.quantity.unit)
    name = ingredient.name or extract_ingredient_name(ingredient.item)
    if name:
        parts.append(name)

    text = " ".join(parts)
    if ingredient.prep:
        text = f"{text}, {ingredient.prep}"
    return ScaledIngredientLine(text=text, scaled=not is_identity_factor(factor))


def scale_free_text(text: str, factor: float) -> ScaledIngredientLine:
    """Rewrite the leading quantity of a free-text line, or leave it alone"""
    unchanged = ScaledIngredientLine(text=text, scaled=False)
    if is_identity_factor(factor):
        return unchanged

    match = LEADING_QUANTITY_RE.match(text)
    if not match:
        return unchanged

    low = parse_quantity(match.group("low").replace(",", ""))
    if low is None:
        return unchanged
    formatted = format_quantity(low * factor)

    if match.group("high"):
        high = parse_quantity(match.group("high").replace(",", ""))
        if high is None:
            return unchanged
        formatted = f"{formatted}{match.group('dash').strip()}{format_quantity(high * factor)}"

    rest = text[match.end():]
    if rest[:1].isspace():
        rest = " " + rest.lstrip()
    return ScaledIngredientLine(text=f"{formatted}{rest}", scaled=True)


def render_ingredient(
    ingredient: Union[Ingredient, str, dict],
    factor: float,
) -> ScaledIngredientLine:
    """
    Display line for one ingredient at the given scale factor.

    Accepts either tagged model case, or a raw stored value (string / dict).
    """
    ingredient = as_ingredient(ingredient)

    if isinstance(ingredient, TextIngredient):
        return scale_free_text(ingredient.text, factor)
    if isinstance(ingredient, StructuredIngredient):
        return _render_structured(ingredient, factor)
    raise TypeError(f"Unsupported ingredient type: {type(ingredient).__name__}")


def render_ingredients(ingredients: Iterable[Union[Ingredient, str, dict]], factor: float) -> List[ScaledIngredientLine]:
    """Display lines for a whole ingredient list, order preserved"""
    return [render_ingredient(ingredient, factor) for ingredient in ingredients]
