"""Schemas for health profile requests and responses."""

from datetime import date
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional


class HealthProfileRequest(BaseModel):
    """Payload for creating or replacing the profile of a user."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: str = Field(..., min_length=1, examples=["user-42"], description="Owner of the profile")
    age: Optional[int] = Field(None, ge=1, examples=[30], description="Age in years")
    gender: Optional[str] = Field(None, examples=["female"])
    height: Optional[float] = Field(None, ge=1, examples=[168.0], description="Height in centimeters")
    weight: Optional[float] = Field(None, ge=1, examples=[62.5], description="Weight in kilograms")
    activity_level: Optional[str] = Field(None, examples=["moderate"])
    health_goal: Optional[str] = Field(None, examples=["weight_loss"])
    dietary_restrictions: Optional[str] = Field(None, max_length=1000, examples=["vegetarian"])
    allergies: Optional[str] = Field(None, max_length=1000, examples=["peanuts"])

    @field_validator("user_id")
    @classmethod
    def user_id_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("User ID is required")
        return value


class HealthProfileResponse(BaseModel):
    """Stored profile with the BMI computed at read time."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    user_id: str
    age: Optional[int] = None
    gender: Optional[str] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    activity_level: Optional[str] = None
    health_goal: Optional[str] = None
    dietary_restrictions: Optional[str] = None
    allergies: Optional[str] = None
    bmi: Optional[float] = None
    created_at: Optional[date] = None
    updated_at: Optional[date] = None
