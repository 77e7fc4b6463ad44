"""
Microdata recipe extraction (itemscope / itemtype / itemprop markup).

Fallback for pages without JSON-LD. Rebuilds a Schema.org-shaped dict from
the first Recipe item on the page:

    <div itemscope itemtype="https://schema.org/Recipe">
      <h1 itemprop="name">Pancakes</h1>
      <li itemprop="recipeIngredient">2 cups flour</li>
      ...
"""

import logging
from typing import Any, Dict, List, Optional, Union

from bs4 import BeautifulSoup, Tag

from .soup import clean_text, make_soup

logger = logging.getLogger(__name__)

RECIPE_VOCABULARY = "schema.org/Recipe"

SIMPLE_PROPERTIES = [
    "name",
    "description",
    "image",
    "author",
    "prepTime",
    "cookTime",
    "totalTime",
    "recipeYield",
    "recipeCategory",
    "recipeCuisine",
]

# "ingredients" is the deprecated Schema.org name still found on older sites
INGREDIENT_PROPERTIES = ("recipeIngredient", "ingredients")
INSTRUCTION_PROPERTY = "recipeInstructions"

# Attribute precedence for a property's value, before falling back to text
VALUE_ATTRIBUTES = ("content", "href", "src")


def _attr_text(tag: Tag, name: str) -> str:
    value = tag.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return value or ""


def _itemprops(tag: Tag) -> List[str]:
    return _attr_text(tag, "itemprop").split()


def is_recipe_scope(tag: Tag) -> bool:
    return tag.has_attr("itemscope") and RECIPE_VOCABULARY in _attr_text(tag, "itemtype")


def _in_scope(tag: Tag, root: Tag) -> bool:
    """True when root is the closest enclosing itemscope of tag"""
    for parent in tag.parents:
        if parent is root:
            return True
        if parent.has_attr("itemscope"):
            return False
    return False


def _find_properties(root: Tag, names) -> List[Tag]:
    names = {names} if isinstance(names, str) else set(names)
    return [
        tag for tag in root.find_all(lambda t: bool(names.intersection(_itemprops(t))))
        if _in_scope(tag, root)
    ]


def property_value(tag: Tag) -> str:
    """content, href or src attribute, else trimmed text"""
    for attr in VALUE_ATTRIBUTES:
        value = _attr_text(tag, attr).strip()
        if value:
            return value
    return clean_text(tag.get_text(" "))


def _ingredient_value(tag: Tag) -> str:
    content = _attr_text(tag, "content").strip()
    return content or clean_text(tag.get_text(" "))


def _instruction_value(tag: Tag) -> str:
    text_tag = tag.find(lambda t: "text" in _itemprops(t))
    if text_tag is not None:
        value = _ingredient_value(text_tag)
        if value:
            return value
    return _ingredient_value(tag)


def extract_microdata_recipe(html: Union[str, BeautifulSoup]) -> Optional[Dict[str, Any]]:
    """
    Return a Schema.org-shaped dict built from the first microdata Recipe.

    Only accepted when it has a name or at least one ingredient; an empty
    itemscope shell counts as no recipe.
    """
    soup = make_soup(html)
    root = soup.find(is_recipe_scope)
    if root is None:
        return None

    recipe: Dict[str, Any] = {"@type": "Recipe"}

    for name in SIMPLE_PROPERTIES:
        for tag in _find_properties(root, name):
            value = property_value(tag)
            if value:
                recipe[name] = value
                break

    ingredients = [
        value for value in (_ingredient_value(tag) for tag in _find_properties(root, INGREDIENT_PROPERTIES))
        if value
    ]
    if ingredients:
        recipe["recipeIngredient"] = ingredients

    instructions = [
        value for value in (_instruction_value(tag) for tag in _find_properties(root, INSTRUCTION_PROPERTY))
        if value
    ]
    if instructions:
        recipe["recipeInstructions"] = instructions

    if not recipe.get("name") and not ingredients:
        logger.debug("Microdata Recipe scope found but it holds no name or ingredients")
        return None

    return recipe
