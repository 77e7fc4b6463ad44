"""
Recipe import / export
"""

import json

import pytest

from exceptions import InvalidRecipeError
from models import Recipe, StructuredIngredient, TextIngredient
from services import export_recipe, import_recipe


class TestImportRecipe:
    """Accepted payloads"""

    def test_dict(self, stored_recipe):
        recipe = import_recipe(stored_recipe)
        assert recipe.name == "Weeknight Chicken"
        assert isinstance(recipe.ingredients[0], TextIngredient)
        assert isinstance(recipe.ingredients[1], StructuredIngredient)

    def test_json_string(self, stored_recipe):
        assert import_recipe(json.dumps(stored_recipe)).name == "Weeknight Chicken"

    def test_recipe_instance(self, stored_recipe):
        recipe = Recipe.model_validate(stored_recipe)
        assert import_recipe(recipe).tags == ["dinner", "easy"]

    def test_tags_are_sanitized(self, stored_recipe):
        assert import_recipe(stored_recipe).tags == ["dinner", "easy"]

    def test_source_url_recorded(self, stored_recipe):
        recipe = import_recipe(stored_recipe, source_url="https://example.com/chicken")
        assert recipe.source.url == "https://example.com/chicken"

    def test_existing_source_kept(self, stored_recipe):
        stored_recipe["source"] = {"url": "https://original.example.com"}
        recipe = import_recipe(stored_recipe, source_url="https://example.com/chicken")
        assert recipe.source.url == "https://original.example.com"

    def test_scaling_policy_without_type_is_linear(self, stored_recipe):
        stored_recipe["ingredients"][1]["scaling"] = {"max": 3}
        recipe = import_recipe(stored_recipe)
        assert recipe.ingredients[1].scaling.type == "linear"
        assert recipe.ingredients[1].scaling.max == 3


class TestImportRejects:
    """Invalid documents raise InvalidRecipeError"""

    def test_missing_name(self, stored_recipe):
        del stored_recipe["name"]
        with pytest.raises(InvalidRecipeError) as excinfo:
            import_recipe(stored_recipe)
        assert excinfo.value.missing == ["name"]

    def test_blank_name(self, stored_recipe):
        stored_recipe["name"] = "   "
        with pytest.raises(InvalidRecipeError):
            import_recipe(stored_recipe)

    def test_empty_ingredients(self, stored_recipe):
        stored_recipe["ingredients"] = []
        with pytest.raises(InvalidRecipeError) as excinfo:
            import_recipe(stored_recipe)
        assert excinfo.value.missing == ["ingredients"]

    def test_bad_json(self):
        with pytest.raises(InvalidRecipeError):
            import_recipe("{not json")

    def test_not_an_object(self):
        with pytest.raises(InvalidRecipeError):
            import_recipe(json.dumps(["a", "list"]))

    def test_negative_amount(self, stored_recipe):
        stored_recipe["ingredients"][1]["quantity"]["amount"] = -1
        with pytest.raises(InvalidRecipeError):
            import_recipe(stored_recipe)

    def test_unknown_scaling_type(self, stored_recipe):
        stored_recipe["ingredients"][1]["scaling"] = {"type": "exponential"}
        with pytest.raises(InvalidRecipeError):
            import_recipe(stored_recipe)


class TestExportRecipe:
    """Stored document shape"""

    def test_round_trip_shapes(self, stored_recipe):
        document = export_recipe(import_recipe(stored_recipe))
        assert document["soustack"] == "0.1"
        assert document["yield"] == {"amount": 4, "unit": "servings", "servings": 4}
        assert document["ingredients"][0] == "2 lbs chicken breast"
        assert document["ingredients"][1] == {
            "item": "1 1/2 cups rice, rinsed",
            "quantity": {"amount": 1.5, "unit": "cups"},
            "name": "rice",
            "prep": "rinsed",
        }
        assert document["ingredients"][2]["scaling"] == {"type": "fixed"}
        assert document["instructions"][1] == {"step": "Sear until golden.", "image": "https://example.com/sear.jpg"}
        assert document["tags"] == ["dinner", "easy"]
        assert "kind" not in document["ingredients"][1]
