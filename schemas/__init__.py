"""Pydantic schema package for request and response models."""

from .recipe_schema import RecipeRequest, RecipeResponse
from .health_profile_schema import HealthProfileRequest, HealthProfileResponse
from .health_schema import HealthCheckResponse

__all__ = [
    "RecipeRequest",
    "RecipeResponse",
    "HealthProfileRequest",
    "HealthProfileResponse",
    "HealthCheckResponse",
]
