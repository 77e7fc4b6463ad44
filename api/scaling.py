from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import Any, Dict, Optional

from exceptions import InvalidRecipeError
from services import import_recipe, scale_factor_for_servings, scale_recipe

router = APIRouter()


class ScaleRequest(BaseModel):
    recipe: Any
    factor: Optional[float] = None
    target_servings: Optional[float] = None


@router.post("/scale")
async def scale(request: ScaleRequest) -> Dict[str, Any]:
    """
    Scaled ingredient lines for a recipe.

    An explicit factor wins; otherwise target_servings is divided by the
    recipe's servings. With neither, the factor is 1.
    """
    try:
        recipe = import_recipe(request.recipe)
    except InvalidRecipeError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e)
        )

    if request.factor is not None:
        factor = request.factor
    else:
        factor = scale_factor_for_servings(recipe, request.target_servings)

    lines = scale_recipe(recipe, factor)
    return {
        "factor": factor,
        "lines": [line.model_dump() for line in lines],
    }
