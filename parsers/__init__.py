"""
Recipe extraction from HTML (JSON-LD first, microdata as fallback)
"""

from .coordinator import EventCallback, ExtractionState, extract_recipe
from .jsonld_parser import extract_jsonld_recipe, find_recipe_node, is_recipe_type
from .microdata_parser import extract_microdata_recipe
from .schema_org import candidate_to_recipe, parse_yield

__all__ = [
    'EventCallback',
    'ExtractionState',
    'extract_recipe',
    'extract_jsonld_recipe',
    'find_recipe_node',
    'is_recipe_type',
    'extract_microdata_recipe',
    'candidate_to_recipe',
    'parse_yield',
]
