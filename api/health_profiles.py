"""Health profiles API router.

Profiles are written and looked up by ``userId`` and deleted by their
internal id. The request body is validated before the service is called.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List
from database.deps import get_db_read, get_db_write
from core.exceptions import NotFoundError
from core.logger import get_logger
from schemas import HealthProfileRequest, HealthProfileResponse
from services.health_profile_service import health_profile_service

logger = get_logger("api.health_profiles")
router = APIRouter(prefix="/api/health-profiles", tags=["health-profiles"])


@router.post("", response_model=HealthProfileResponse, status_code=status.HTTP_201_CREATED)
def create_or_update_profile(payload: HealthProfileRequest, db: Session = Depends(get_db_write)):
    """Create the profile for ``payload.userId`` or replace the existing one.

    Args:
        payload: Validated `HealthProfileRequest`.
        db: Write session injected by dependency.

    Returns:
        The stored profile including its computed BMI.
    """
    logger.info("Saving health profile for user_id=%s", payload.user_id)
    return health_profile_service.create_or_update(db, payload)


@router.get("/user/{user_id}", response_model=HealthProfileResponse)
def get_profile_by_user_id(user_id: str, db: Session = Depends(get_db_read)):
    profile = health_profile_service.get_by_user_id(db, user_id)
    if profile is None:
        raise NotFoundError("HealthProfile", user_id, field="userId")
    return profile


@router.get("", response_model=List[HealthProfileResponse])
def list_profiles(db: Session = Depends(get_db_read)):
    return health_profile_service.list_all(db)


@router.delete("/{profile_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_profile(profile_id: int, db: Session = Depends(get_db_write)):
    """Delete a profile by its internal id. Unknown ids still return 204."""
    health_profile_service.delete_by_id(db, profile_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
