from pydantic import BaseModel


class RecipeValue(BaseModel):
    """Base class for recipe value objects (immutable, stored-document aliases)"""

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "extra": "ignore",
    }

    def to_document(self) -> dict:
        """Dump to the stored document shape (aliases, no empty fields)"""
        return self.model_dump(by_alias=True, exclude_none=True)
