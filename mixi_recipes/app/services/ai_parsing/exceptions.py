"""Exceptions raised by the AI recipe parser."""


class RecipeParsingError(ValueError):
    """Base exception for recipe parsing errors."""


class RecipeValidationError(RecipeParsingError):
    """Raised when a candidate result is not a JSON object at all.

    Individual bad recipes never raise; they are dropped.
    """
