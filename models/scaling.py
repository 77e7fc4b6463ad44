"""
Scaling policies - how one ingredient's quantity follows the recipe scale factor.

Closed set of five variants discriminated on ``type``:

    {"type": "linear"}
    {"type": "proportional", "factor": 0.7}
    {"type": "sublinear", "factor": 0.8}
    {"type": "fixed"}
    {"type": "discrete", "values": [2, 4, 6, 8]}

Every variant may carry ``min`` / ``max`` clamps.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field, field_validator

from .base import RecipeValue

DEFAULT_PROPORTIONAL_EXPONENT = 0.7
DEFAULT_SUBLINEAR_EXPONENT = 0.8


class _ClampedScaling(RecipeValue):
    min: Optional[float] = Field(None, description="Lower bound applied after scaling")
    max: Optional[float] = Field(None, description="Upper bound applied after scaling")


class LinearScaling(_ClampedScaling):
    """Quantity grows 1:1 with the scale factor (the default)"""
    type: Literal["linear"] = "linear"


class ProportionalScaling(_ClampedScaling):
    """Quantity grows with factor ** exponent, e.g. salt and seasoning"""
    type: Literal["proportional"] = "proportional"
    factor: float = Field(DEFAULT_PROPORTIONAL_EXPONENT, description="Exponent applied to the scale factor")


class SublinearScaling(_ClampedScaling):
    """Like proportional with a gentler default exponent"""
    type: Literal["sublinear"] = "sublinear"
    factor: float = Field(DEFAULT_SUBLINEAR_EXPONENT, description="Exponent applied to the scale factor")


class FixedScaling(_ClampedScaling):
    """Quantity never changes (a bay leaf, one pan)"""
    type: Literal["fixed"] = "fixed"


class DiscreteScaling(_ClampedScaling):
    """Quantity is rounded to whole units, optionally to a permitted set"""
    type: Literal["discrete"] = "discrete"
    values: Optional[List[float]] = Field(None, description="Permitted quantities to snap to")

    @field_validator("values")
    @classmethod
    def drop_empty_values(cls, v):
        """An empty permitted set means plain integer rounding"""
        return v or None


ScalingPolicy = Annotated[
    Union[LinearScaling, ProportionalScaling, SublinearScaling, FixedScaling, DiscreteScaling],
    Field(discriminator="type"),
]
