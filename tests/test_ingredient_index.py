"""
Searchable ingredient names
"""

from models import Recipe
from services import extract_ingredient_names


class TestExtractIngredientNames:
    """Quantity words dropped, structured names preferred"""

    def test_mixed_ingredients(self, stored_recipe):
        recipe = Recipe.model_validate(stored_recipe)
        assert extract_ingredient_names(recipe) == [
            "lbs chicken breast",
            "rice",
            "salt",
            "a pinch of pepper",
        ]

    def test_quantity_words_removed(self):
        recipe = Recipe(name="Cake", ingredients=["2 cups flour", "1 tbsp sugar", "250 g butter"])
        assert extract_ingredient_names(recipe) == ["flour", "sugar", "butter"]

    def test_structured_without_name_uses_item(self):
        recipe = Recipe(name="Cake", ingredients=[{"item": "Two Eggs"}])
        assert extract_ingredient_names(recipe) == ["two eggs"]

    def test_quantity_only_lines_are_dropped(self):
        recipe = Recipe(name="Cake", ingredients=["2 cups", "1 egg"])
        assert extract_ingredient_names(recipe) == ["egg"]
