"""
Recipe value models shared by the extraction and scaling code.
"""

from .base import RecipeValue
from .extraction import ExtractionCandidate, ScaledIngredientLine
from .recipe import (
    Author,
    Equipment,
    Ingredient,
    Instruction,
    Quantity,
    Recipe,
    RecipeTime,
    RecipeYield,
    Source,
    StructuredIngredient,
    StructuredInstruction,
    TextIngredient,
    TextInstruction,
    TimePhase,
    as_ingredient,
    coerce_ingredient,
    coerce_instruction,
)
from .scaling import (
    DiscreteScaling,
    FixedScaling,
    LinearScaling,
    ProportionalScaling,
    ScalingPolicy,
    SublinearScaling,
)

__all__ = [
    'RecipeValue',
    'ExtractionCandidate',
    'ScaledIngredientLine',
    'Author',
    'Equipment',
    'Ingredient',
    'Instruction',
    'Quantity',
    'Recipe',
    'RecipeTime',
    'RecipeYield',
    'Source',
    'StructuredIngredient',
    'StructuredInstruction',
    'TextIngredient',
    'TextInstruction',
    'TimePhase',
    'as_ingredient',
    'coerce_ingredient',
    'coerce_instruction',
    'DiscreteScaling',
    'FixedScaling',
    'LinearScaling',
    'ProportionalScaling',
    'ScalingPolicy',
    'SublinearScaling',
]
