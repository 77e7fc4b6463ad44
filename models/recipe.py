from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import Field, TypeAdapter, field_validator

from .base import RecipeValue
from .scaling import ScalingPolicy


class Quantity(RecipeValue):
    """Amount plus optional unit ("2 eggs" has no unit)"""
    amount: float = Field(..., ge=0, description="Non-negative amount")
    unit: Optional[str] = Field(None, description="Unit, None for unitless counts")


class TextIngredient(RecipeValue):
    """Free-text ingredient line such as "2 cups flour" """
    kind: Literal["text"] = "text"
    text: str

    def to_document(self) -> str:
        return self.text


class StructuredIngredient(RecipeValue):
    """Ingredient with explicit quantity, name and scaling metadata"""
    kind: Literal["structured"] = "structured"
    item: str = Field(..., description="Full original ingredient text")
    quantity: Optional[Quantity] = None
    name: Optional[str] = Field(None, description="Normalized ingredient name")
    prep: Optional[str] = None
    destination: Optional[str] = None
    scaling: Optional[ScalingPolicy] = Field(None, description="Scaling policy, linear when absent")
    optional: Optional[bool] = None
    notes: Optional[str] = None

    @field_validator("scaling", mode="before")
    @classmethod
    def default_policy_type(cls, v):
        if isinstance(v, dict) and "type" not in v:
            return {**v, "type": "linear"}
        return v

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, exclude={"kind"})


class TextInstruction(RecipeValue):
    kind: Literal["text"] = "text"
    text: str

    def to_document(self) -> str:
        return self.text


class StructuredInstruction(RecipeValue):
    kind: Literal["structured"] = "structured"
    step: str
    duration: Optional[str] = None
    equipment: Optional[str] = None
    ingredients: List[str] = Field(default_factory=list, description="Referenced ingredient names")
    notes: Optional[str] = None
    image: Optional[str] = None

    def to_document(self) -> dict:
        doc = self.model_dump(by_alias=True, exclude_none=True, exclude={"kind"})
        if not doc.get("ingredients"):
            doc.pop("ingredients", None)
        return doc


Ingredient = Annotated[Union[TextIngredient, StructuredIngredient], Field(discriminator="kind")]
Instruction = Annotated[Union[TextInstruction, StructuredInstruction], Field(discriminator="kind")]


def coerce_ingredient(raw: Any) -> Any:
    """Map a stored ingredient (string or plain dict) onto its tagged case"""
    if isinstance(raw, str):
        return {"kind": "text", "text": raw}
    if isinstance(raw, dict) and "kind" not in raw:
        return {**raw, "kind": "structured"}
    return raw


_INGREDIENT_ADAPTER = TypeAdapter(Ingredient)


def as_ingredient(raw: Any):
    """Validate a stored ingredient value (or pass a model through)"""
    if isinstance(raw, (TextIngredient, StructuredIngredient)):
        return raw
    return _INGREDIENT_ADAPTER.validate_python(coerce_ingredient(raw))


def coerce_instruction(raw: Any) -> Any:
    """Map a stored instruction (string or plain dict) onto its tagged case"""
    if isinstance(raw, str):
        return {"kind": "text", "text": raw}
    if isinstance(raw, dict) and "kind" not in raw:
        return {**raw, "kind": "structured"}
    return raw


class Equipment(RecipeValue):
    name: str
    id: Optional[str] = None
    required: Optional[bool] = None
    alternatives: Optional[List[str]] = None
    capacity: Optional[Quantity] = None
    notes: Optional[str] = None


class Author(RecipeValue):
    name: Optional[str] = None
    url: Optional[str] = None


class Source(RecipeValue):
    url: Optional[str] = None
    adapted: Optional[bool] = None


class RecipeYield(RecipeValue):
    amount: float
    unit: str
    servings: Optional[float] = None
    description: Optional[str] = None


class TimePhase(RecipeValue):
    phase: str
    active: Optional[Union[str, int]] = None
    passive: Optional[Union[str, int]] = None


class RecipeTime(RecipeValue):
    """Durations as ISO-8601 strings ("PT15M") or raw minute counts"""
    active: Optional[Union[str, int]] = None
    passive: Optional[Union[str, int]] = None
    total: Optional[Union[str, int]] = None
    breakdown: Optional[List[TimePhase]] = None


class Recipe(RecipeValue):
    """Canonical recipe. Name and at least one ingredient are required."""
    format_version: str = Field("0.1", alias="soustack", description="Recipe document format version")
    id: Optional[str] = None
    name: str = Field(..., min_length=1, description="Recipe name")
    description: Optional[str] = None
    author: Optional[Author] = None
    source: Optional[Source] = None
    image: Optional[Union[str, List[str]]] = None
    recipe_yield: Optional[RecipeYield] = Field(None, alias="yield")
    time: Optional[RecipeTime] = None
    ingredients: List[Ingredient] = Field(..., min_length=1, description="Ordered ingredient list")
    instructions: List[Instruction] = Field(default_factory=list, description="Ordered steps")
    equipment: Optional[List[Union[str, Equipment]]] = None
    tags: Optional[List[str]] = None
    notes: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v

    @field_validator("ingredients", mode="before")
    @classmethod
    def coerce_ingredients(cls, v):
        if isinstance(v, list):
            return [coerce_ingredient(item) for item in v]
        return v

    @field_validator("instructions", mode="before")
    @classmethod
    def coerce_instructions(cls, v):
        if v is None:
            return []
        if isinstance(v, list):
            return [coerce_instruction(item) for item in v]
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def empty_tags_are_none(cls, v):
        return v or None

    @property
    def servings(self) -> Optional[float]:
        if self.recipe_yield is None:
            return None
        return self.recipe_yield.servings

    def to_document(self) -> dict:
        """Plain stored-recipe document (strings stay strings)"""
        doc = self.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude={"ingredients", "instructions", "equipment"},
        )
        doc["ingredients"] = [ing.to_document() for ing in self.ingredients]
        doc["instructions"] = [inst.to_document() for inst in self.instructions]
        if self.equipment is not None:
            doc["equipment"] = [
                e if isinstance(e, str) else e.to_document() for e in self.equipment
            ]
        return doc
