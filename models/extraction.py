from typing import Any, Dict, Literal

from pydantic import BaseModel, Field


class ExtractionCandidate(BaseModel):
    """Raw Schema.org-shaped recipe pulled out of a page (not persisted)"""
    source: Literal["json-ld", "microdata"] = Field(..., description="Extractor that produced the data")
    data: Dict[str, Any] = Field(..., description="Schema.org Recipe object as found")

    model_config = {"frozen": True}

    @property
    def name(self):
        return self.data.get("name")


class ScaledIngredientLine(BaseModel):
    """Display-ready ingredient line for one scale factor"""
    text: str = Field(..., description="Rendered ingredient line")
    scaled: bool = Field(..., description="Whether the quantity was actually scaled")

    model_config = {"frozen": True}
