"""
JSON-LD recipe extraction.

Most recipe sites embed a Schema.org Recipe object in a
<script type="application/ld+json"> block. This is the most reliable source,
so the coordinator tries it before microdata.
"""

import json
import logging
import re
from typing import Any, Dict, Iterator, Optional, Union

from bs4 import BeautifulSoup

from .soup import make_soup

logger = logging.getLogger(__name__)

JSONLD_MIME_TYPE = "application/ld+json"

_HTML_COMMENT_RE = re.compile(r"^\s*<!--\s*|\s*-->\s*$")


def is_recipe_type(type_value: Any) -> bool:
    """True for "Recipe" or a type list containing "Recipe" """
    if isinstance(type_value, str):
        return type_value == "Recipe"
    if isinstance(type_value, list):
        return "Recipe" in type_value
    return False


def _is_recipe_node(node: Any) -> bool:
    return isinstance(node, dict) and is_recipe_type(node.get("@type"))


def find_recipe_node(payload: Any) -> Optional[Dict[str, Any]]:
    """
    First Recipe object in a parsed JSON-LD payload.

    Handles a single object, an array of objects (first Recipe wins) and an
    object wrapping its nodes in "@graph".
    """
    if isinstance(payload, list):
        for node in payload:
            if _is_recipe_node(node):
                return node
        return None

    if isinstance(payload, dict):
        if _is_recipe_node(payload):
            return payload
        graph = payload.get("@graph")
        if isinstance(graph, list):
            return find_recipe_node(graph)

    return None


def _is_jsonld_type(value: Optional[str]) -> bool:
    return bool(value) and value.split(";")[0].strip().lower() == JSONLD_MIME_TYPE


def iter_jsonld_blocks(html: Union[str, BeautifulSoup]) -> Iterator[str]:
    """Raw text of every JSON-LD script block, in document order"""
    soup = make_soup(html)
    for script in soup.find_all("script", attrs={"type": _is_jsonld_type}):
        raw = script.string if script.string is not None else script.get_text()
        yield _HTML_COMMENT_RE.sub("", raw or "")


def extract_jsonld_recipe(html: Union[str, BeautifulSoup]) -> Optional[Dict[str, Any]]:
    """
    Return the first Schema.org Recipe object found in the page's JSON-LD.

    A block with invalid JSON is skipped; later blocks are still scanned.
    Returns None when no block holds a Recipe.
    """
    for index, raw in enumerate(iter_jsonld_blocks(html)):
        try:
            payload = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            logger.debug(f"Skipping malformed JSON-LD block {index}: {e}")
            continue

        recipe = find_recipe_node(payload)
        if recipe is not None:
            return recipe

    return None
