from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel
from typing import Any, Dict, Optional

from exceptions import InvalidRecipeError, RecipeFetchError
from parsers import candidate_to_recipe, extract_recipe
from services import export_recipe, import_recipe
from services import html_fetcher
from services.telemetry import logfire_event_sink

router = APIRouter()


class ScrapeRequest(BaseModel):
    url: str


class ExtractRequest(BaseModel):
    html: str
    source_url: Optional[str] = None


class ImportRequest(BaseModel):
    recipe: Any


def _convert(html: str, source_url: Optional[str]):
    """Extract + convert, mapping the outcomes onto HTTP errors"""
    candidate = extract_recipe(html, on_event=logfire_event_sink)
    if candidate is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No recipe found on page"
        )
    try:
        recipe = candidate_to_recipe(candidate, source_url=source_url, on_event=logfire_event_sink)
    except InvalidRecipeError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e)
        )
    return candidate, recipe


@router.post("/scrape")
async def scrape_recipe(request: ScrapeRequest) -> Dict[str, Any]:
    """
    Fetch a recipe page and return its canonical recipe.

    Input: {"url": "https://www.example.com/recipe/..."}
    Output: {"recipe": {...}}
    """
    try:
        html = await html_fetcher.fetch_html(request.url)
    except RecipeFetchError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e)
        )

    _, recipe = _convert(html, request.url)
    return {"recipe": export_recipe(recipe)}


@router.post("/extract")
async def extract_from_html(request: ExtractRequest) -> Dict[str, Any]:
    """Run extraction on HTML the client already has"""
    candidate, recipe = _convert(request.html, request.source_url)
    return {
        "source": candidate.source,
        "candidate": candidate.data,
        "recipe": export_recipe(recipe),
    }


@router.post("/recipes/import")
async def import_recipe_document(request: ImportRequest) -> Dict[str, Any]:
    """Validate a pasted / uploaded recipe document and clean its tags"""
    try:
        recipe = import_recipe(request.recipe, on_event=logfire_event_sink)
    except InvalidRecipeError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e)
        )
    return export_recipe(recipe)
