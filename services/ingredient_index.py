from typing import List

from models.recipe import Recipe, StructuredIngredient

# Quantity words dropped from free-text lines before indexing
QUANTITY_WORDS = {"cup", "cups", "tbsp", "tsp", "oz", "lb", "g", "kg", "ml", "l"}


def extract_ingredient_names(recipe: Recipe) -> List[str]:
    """
    Searchable ingredient names for a recipe.

    "2 cups flour" -> "flour"; structured ingredients use their name, else
    their item text. Empty results are left out.
    """
    names = []
    for ingredient in recipe.ingredients:
        if isinstance(ingredient, StructuredIngredient):
            name = (ingredient.name or ingredient.item).lower().strip()
        else:
            words = ingredient.text.lower().split()
            name = " ".join(
                word for word in words
                if word not in QUANTITY_WORDS and not word[0].isdigit()
            ).strip()
        if name:
            names.append(name)
    return names
