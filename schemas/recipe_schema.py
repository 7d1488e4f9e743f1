"""Schemas for recipe requests and responses.

JSON keys are camelCase (``preparationTime``, ``imageUrl``); snake_case
field names are accepted on input too.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional


class RecipeRequest(BaseModel):
    """Payload for creating or fully replacing a recipe.

    Every field is optional here; omitted fields are stored as null. The
    database rejects a missing name.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = Field(None, examples=["Grilled Chicken Salad"])
    description: Optional[str] = Field(None, max_length=2000)
    ingredients: Optional[str] = Field(None, max_length=5000, examples=["Chicken breast 200g, Mixed greens 100g"])
    instructions: Optional[str] = Field(None, max_length=5000)
    calories: Optional[int] = Field(None, examples=[350], description="Energy per serving in kcal")
    protein: Optional[float] = Field(None, examples=[35.0], description="Protein in grams")
    carbohydrates: Optional[float] = Field(None, examples=[15.0], description="Carbohydrates in grams")
    fat: Optional[float] = Field(None, examples=[18.0], description="Fat in grams")
    preparation_time: Optional[int] = Field(None, examples=[25], description="Preparation time in minutes")
    difficulty: Optional[str] = Field(None, examples=["Easy"])
    category: Optional[str] = Field(None, examples=["Salad"])
    tags: Optional[str] = Field(None, max_length=1000, examples=["high-protein,low-carb"], description="Comma-separated tags")
    image_url: Optional[str] = None


class RecipeResponse(RecipeRequest):
    """Stored recipe returned by the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
