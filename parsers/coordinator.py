"""
Extraction coordinator: JSON-LD first, microdata as fallback.

    seeking --json-ld hit--------------> found (json-ld)
    seeking --json-ld miss, microdata--> found (microdata)
    seeking --both miss----------------> not_found

A JSON-LD hit is authoritative even when incomplete; microdata is not run.
Not finding a recipe is an expected outcome and returns None.
"""

from enum import Enum
from typing import Any, Callable, Dict, Optional, Union

from bs4 import BeautifulSoup

from models.extraction import ExtractionCandidate
from .jsonld_parser import extract_jsonld_recipe
from .microdata_parser import extract_microdata_recipe
from .soup import make_soup

# Optional telemetry hook: on_event("extraction_found", {"source": "json-ld"})
EventCallback = Callable[[str, Dict[str, Any]], None]


class ExtractionState(str, Enum):
    """Terminal states reported to on_event"""
    found = "found"
    not_found = "not_found"


def _emit(on_event: Optional[EventCallback], event: str, **fields) -> None:
    if on_event is not None:
        on_event(event, fields)


def extract_recipe(
    html: Union[str, BeautifulSoup],
    on_event: Optional[EventCallback] = None,
) -> Optional[ExtractionCandidate]:
    """Return the page's recipe candidate, or None when it has none"""
    soup = make_soup(html)
    candidate = None

    data = extract_jsonld_recipe(soup)
    if data is not None:
        candidate = ExtractionCandidate(source="json-ld", data=data)
    else:
        data = extract_microdata_recipe(soup)
        if data:
            candidate = ExtractionCandidate(source="microdata", data=data)

    if candidate is not None:
        state = ExtractionState.found
        _emit(on_event, "extraction_found", state=state.value, source=candidate.source, name=candidate.name)
    else:
        state = ExtractionState.not_found
        _emit(on_event, "extraction_not_found", state=state.value)

    return candidate
