"""Health profile service.

Profiles are keyed on ``user_id`` for writes and lookups, while deletion
goes by the internal numeric id. BMI is never stored; it is computed on
every read with `nutrition_calculator`.
"""

from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session
from core.exceptions import DatabaseError
from core.logger import get_logger
from database.models import HealthProfile
from database.repositories import HealthProfileRepository
from schemas.health_profile_schema import HealthProfileRequest, HealthProfileResponse
from services.nutrition_calculator import nutrition_calculator

logger = get_logger("services.health_profile_service")

PROFILE_FIELDS = (
    "user_id",
    "age",
    "gender",
    "height",
    "weight",
    "activity_level",
    "health_goal",
    "dietary_restrictions",
    "allergies",
)


def to_response(profile: HealthProfile) -> HealthProfileResponse:
    """Copy a stored profile into its response shape, adding the BMI."""
    return HealthProfileResponse(
        id=profile.id,
        user_id=profile.user_id,
        age=profile.age,
        gender=profile.gender,
        height=profile.height,
        weight=profile.weight,
        activity_level=profile.activity_level,
        health_goal=profile.health_goal,
        dietary_restrictions=profile.dietary_restrictions,
        allergies=profile.allergies,
        bmi=nutrition_calculator.calculate_bmi(profile.height, profile.weight),
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )


class HealthProfileService:
    """Upsert, lookup and delete operations over health profiles."""

    def create_or_update(self, db: Session, payload: HealthProfileRequest) -> HealthProfileResponse:
        """Create the user's profile, or replace all fields of the existing one.

        The existing row keeps its id and ``created_at``; ``updated_at`` is
        set to today either way.
        """
        today = date.today()
        values = {field: getattr(payload, field) for field in PROFILE_FIELDS}
        values["created_at"] = today
        values["updated_at"] = today

        profile = HealthProfileRepository(db).upsert_by_user_id(values)
        if profile is None:
            raise DatabaseError("Health profile could not be read back after upsert", operation="upsert")
        logger.info("Health profile for user_id=%s saved (id=%s)", profile.user_id, profile.id)
        return to_response(profile)

    def get_by_user_id(self, db: Session, user_id: str) -> Optional[HealthProfileResponse]:
        profile = HealthProfileRepository(db).find_by_user_id(user_id)
        return to_response(profile) if profile else None

    def list_all(self, db: Session) -> List[HealthProfileResponse]:
        return [to_response(p) for p in HealthProfileRepository(db).get_all()]

    def delete_by_id(self, db: Session, profile_id: int) -> None:
        """Delete a profile by internal id. Unknown ids are ignored."""
        if HealthProfileRepository(db).delete_by_id(profile_id):
            logger.info("Health profile id=%s deleted", profile_id)


health_profile_service = HealthProfileService()
__all__ = ["HealthProfileService", "health_profile_service", "to_response"]
