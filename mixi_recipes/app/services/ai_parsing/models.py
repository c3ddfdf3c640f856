"""Pydantic models for AI recipe parsing."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


class Ingredient(BaseModel):
    """One ingredient line; quantity stays a string ("1/2", "a splash")."""

    quantity: str = ""
    unit: str = ""
    item: str
    notes: Optional[str] = None

    @field_validator("item")
    @classmethod
    def validate_item(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("ingredient item is required")
        return value


class Recipe(BaseModel):
    """A normalized cocktail recipe."""

    name: str
    description: Optional[str] = None
    ingredients: List[Ingredient] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    glassware: Optional[str] = None
    garnish: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("recipe name is required")
        return value


class ParseResult(BaseModel):
    """Result of parsing one raw LLM response."""

    recipes: List[Recipe] = Field(default_factory=list)
    strategy: Optional[str] = None
    warnings: List[str] = Field(default_factory=list)


class SkipReason(str, Enum):
    INVALID_JSON = "invalid_json"
    NOT_AN_OBJECT = "not_an_object"
    MISSING_NAME = "missing_name"
    UNCLASSIFIED_ORPHAN = "unclassified_orphan"
    TOO_DEEP = "too_deep"


class OrphanClass(str, Enum):
    INGREDIENTS_LIKE = "ingredients_like"
    INSTRUCTIONS_LIKE = "instructions_like"
    UNCLASSIFIED = "unclassified"


class ChunkOutcome(BaseModel):
    """Outcome of parsing one extracted chunk: a value or the reason it was skipped."""

    index: int
    value: Any = None
    skip_reason: Optional[SkipReason] = None
    repaired: bool = False

    @property
    def ok(self) -> bool:
        return self.skip_reason is None
