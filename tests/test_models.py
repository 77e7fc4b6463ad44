"""
Recipe value models
"""

import pytest
from pydantic import ValidationError

from models import (
    DiscreteScaling,
    ExtractionCandidate,
    ProportionalScaling,
    Quantity,
    Recipe,
    StructuredIngredient,
    StructuredInstruction,
    TextIngredient,
    TextInstruction,
    as_ingredient,
)


class TestRecipe:
    """Required fields and tagged variants"""

    def test_string_and_dict_cases(self, stored_recipe):
        recipe = Recipe.model_validate(stored_recipe)
        assert isinstance(recipe.ingredients[0], TextIngredient)
        assert isinstance(recipe.ingredients[1], StructuredIngredient)
        assert isinstance(recipe.instructions[0], TextInstruction)
        assert isinstance(recipe.instructions[1], StructuredInstruction)

    def test_yield_alias(self, stored_recipe):
        recipe = Recipe.model_validate(stored_recipe)
        assert recipe.recipe_yield.unit == "servings"
        assert recipe.servings == 4

    def test_name_required(self):
        with pytest.raises(ValidationError):
            Recipe(ingredients=["1 egg"])

    def test_ingredients_required(self):
        with pytest.raises(ValidationError):
            Recipe(name="Nothing", ingredients=[])

    def test_frozen(self, stored_recipe):
        recipe = Recipe.model_validate(stored_recipe)
        with pytest.raises(ValidationError):
            recipe.name = "Changed"

    def test_empty_tags_are_none(self):
        assert Recipe(name="Egg", ingredients=["1 egg"], tags=[]).tags is None

    def test_time_accepts_minutes_or_iso(self):
        recipe = Recipe(name="Egg", ingredients=["1 egg"], time={"active": 5, "total": "PT10M"})
        assert recipe.time.active == 5
        assert recipe.time.total == "PT10M"


class TestIngredients:
    """Ingredient variants and quantity invariants"""

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError):
            Quantity(amount=-0.5, unit="cup")

    def test_unitless_quantity(self):
        assert Quantity(amount=2).unit is None

    def test_as_ingredient(self):
        assert isinstance(as_ingredient("2 eggs"), TextIngredient)
        ingredient = as_ingredient({"item": "1 tsp salt", "scaling": {"type": "proportional", "factor": 0.5}})
        assert isinstance(ingredient.scaling, ProportionalScaling)
        assert ingredient.scaling.factor == 0.5

    def test_model_passes_through(self):
        ingredient = TextIngredient(text="1 egg")
        assert as_ingredient(ingredient) is ingredient

    def test_discrete_values(self):
        ingredient = as_ingredient({"item": "2 eggs", "scaling": {"type": "discrete", "values": [1, 2, 3]}})
        assert isinstance(ingredient.scaling, DiscreteScaling)
        assert ingredient.scaling.values == [1, 2, 3]


class TestExtractionCandidate:
    """Transient extraction result"""

    def test_name(self):
        candidate = ExtractionCandidate(source="microdata", data={"name": "Pie"})
        assert candidate.name == "Pie"

    def test_unknown_source_rejected(self):
        with pytest.raises(ValidationError):
            ExtractionCandidate(source="rdfa", data={})
