"""
Custom exception classes for recipe import and extraction
"""


class RecipeError(Exception):
    """Base exception for recipe handling"""
    pass


class InvalidRecipeError(RecipeError):
    """Raised when a recipe is missing required fields (name, ingredients)"""
    def __init__(self, missing: list, detail: str = None):
        self.missing = list(missing)
        self.detail = detail
        message = f"Invalid recipe: missing {' or '.join(self.missing)}" if self.missing else "Invalid recipe"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class RecipeFetchError(RecipeError):
    """Raised when a recipe page cannot be downloaded"""
    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")
