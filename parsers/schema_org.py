"""
Schema.org candidate -> canonical Recipe conversion.

Both extractors hand back the loose Schema.org shape sites actually publish
(strings or lists for image and yield, HowToStep / HowToSection for steps,
comma-separated keywords). This module maps that onto the Recipe model.
"""

import html
import logging
import re
from typing import Any, Dict, List, Optional, Union

from exceptions import InvalidRecipeError
from models.extraction import ExtractionCandidate
from models.recipe import Author, Recipe, RecipeTime, RecipeYield, Source
from services.tag_sanitizer import EventCallback, sanitize_recipe_tags
from .soup import clean_text

logger = logging.getLogger(__name__)

_YIELD_RE = re.compile(r"(\d+(?:\.\d+)?)\s*(.*)")
_SERVING_UNITS = ("serving", "servings", "people", "persons", "portion", "portions")


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (int, float)):
        value = str(value)
    if not isinstance(value, str):
        return None
    return clean_text(html.unescape(value)) or None


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _image_url(value: Any) -> Optional[str]:
    """Image as a string, an ImageObject dict or a list of either"""
    if isinstance(value, list):
        for item in value:
            url = _image_url(item)
            if url:
                return url
        return None
    if isinstance(value, dict):
        return _text(value.get("url") or value.get("contentUrl"))
    return _text(value)


def _images(value: Any) -> Optional[Union[str, List[str]]]:
    urls = [url for url in (_image_url(item) for item in _as_list(value)) if url]
    if not urls:
        return None
    return urls[0] if len(urls) == 1 else urls


def _author(value: Any) -> Optional[Author]:
    for item in _as_list(value):
        if isinstance(item, dict):
            name = _text(item.get("name"))
            url = _text(item.get("url"))
            if name or url:
                return Author(name=name, url=url)
        else:
            name = _text(item)
            if name:
                return Author(name=name)
    return None


def parse_yield(value: Any) -> Optional[RecipeYield]:
    """
    "4 servings", "Makes 12 cookies", 6 or ["6", "6 servings"] -> RecipeYield.

    Servings are only known when the unit is a serving-like word (or absent).
    """
    for item in _as_list(value):
        description = _text(item)
        if not description:
            continue
        match = _YIELD_RE.search(description)
        if not match:
            continue
        amount = float(match.group(1))
        unit = match.group(2).strip().lower() or "servings"
        servings = amount if unit.split()[0] in _SERVING_UNITS else None
        return RecipeYield(amount=amount, unit=unit, servings=servings, description=description)
    return None


def _time(data: Dict[str, Any]) -> Optional[RecipeTime]:
    active = _text(data.get("prepTime"))
    passive = _text(data.get("cookTime"))
    total = _text(data.get("totalTime"))
    if not (active or passive or total):
        return None
    return RecipeTime(active=active, passive=passive, total=total)


def _instructions(value: Any) -> List[Union[str, Dict[str, Any]]]:
    """Flatten strings, HowToStep and HowToSection into stored instructions"""
    if isinstance(value, str):
        return [line for line in (clean_text(part) for part in value.splitlines()) if line]

    steps: List[Union[str, Dict[str, Any]]] = []
    for item in _as_list(value):
        if isinstance(item, str):
            text = _text(item)
            if text:
                steps.append(text)
        elif isinstance(item, dict):
            if item.get("@type") == "HowToSection" or "itemListElement" in item:
                steps.extend(_instructions(item.get("itemListElement")))
                continue
            text = _text(item.get("text")) or _text(item.get("name"))
            if not text:
                continue
            image = _image_url(item.get("image"))
            steps.append({"step": text, "image": image} if image else text)
    return steps


def _tags(data: Dict[str, Any]) -> List[str]:
    tags: List[str] = []
    for key in ("keywords", "recipeCategory", "recipeCuisine"):
        for item in _as_list(data.get(key)):
            if not isinstance(item, str):
                continue
            parts = item.split(",") if key == "keywords" else [item]
            tags.extend(tag for tag in (_text(part) for part in parts) if tag)
    return tags


def candidate_to_recipe(
    candidate: Union[ExtractionCandidate, Dict[str, Any]],
    source_url: Optional[str] = None,
    on_event: Optional[EventCallback] = None,
) -> Recipe:
    """
    Convert an extracted Schema.org Recipe into the canonical Recipe.

    Args:
        candidate: Extraction candidate, or the bare Schema.org dict
        source_url: Page the recipe came from (falls back to the candidate's url)
        on_event: Optional callback forwarded to the tag sanitizer

    Raises:
        InvalidRecipeError: When the candidate has no name or no ingredients
    """
    data = candidate.data if isinstance(candidate, ExtractionCandidate) else candidate

    name = _text(data.get("name"))
    ingredients = [
        text for text in (_text(item) for item in _as_list(data.get("recipeIngredient") or data.get("ingredients")))
        if text
    ]

    missing = []
    if not name:
        missing.append("name")
    if not ingredients:
        missing.append("ingredients")
    if missing:
        logger.debug(f"Rejecting extracted recipe, missing {missing}")
        raise InvalidRecipeError(missing)

    url = source_url or _text(data.get("url"))
    recipe = Recipe(
        name=name,
        description=_text(data.get("description")),
        author=_author(data.get("author")),
        source=Source(url=url) if url else None,
        image=_images(data.get("image")),
        recipe_yield=parse_yield(data.get("recipeYield") or data.get("yield")),
        time=_time(data),
        ingredients=ingredients,
        instructions=_instructions(data.get("recipeInstructions")),
        tags=_tags(data),
    )
    return sanitize_recipe_tags(recipe, on_event=on_event)
