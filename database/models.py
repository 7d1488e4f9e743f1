"""SQLAlchemy ORM models for the DietHub service.

Defines the `recipes`, `health_profiles` and `health_records` tables. Models
carry no lifecycle hooks: timestamps are stamped explicitly by the services
(and by `new_health_record` for health records).
"""

from sqlalchemy import Column, Integer, String, Float, DateTime, Date, Text
from sqlalchemy.orm import declarative_base
from datetime import date

Base = declarative_base()


class Recipe(Base):
    """ORM model representing a recipe with its nutrition facts.

    `tags` is a free-form comma-separated string, e.g. "vegan,high-fiber".
    """

    __tablename__ = "recipes"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(String(2000), nullable=True)
    ingredients = Column(Text(5000), nullable=True)
    instructions = Column(Text(5000), nullable=True)
    calories = Column(Integer, nullable=True)
    protein = Column(Float, nullable=True)
    carbohydrates = Column(Float, nullable=True)
    fat = Column(Float, nullable=True)
    preparation_time = Column(Integer, nullable=True)  # minutes
    difficulty = Column(String(50), nullable=True)
    category = Column(String(100), nullable=True)
    tags = Column(String(1000), nullable=True)
    image_url = Column(String(500), nullable=True)
    created_at = Column(DateTime, nullable=True)
    updated_at = Column(DateTime, nullable=True)


class HealthProfile(Base):
    """ORM model holding one user's body metrics and goals.

    `user_id` is the natural key; at most one profile exists per user.
    """

    __tablename__ = "health_profiles"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(255), nullable=False, unique=True, index=True)
    age = Column(Integer, nullable=True)
    gender = Column(String(50), nullable=True)
    height = Column(Float, nullable=True)  # cm
    weight = Column(Float, nullable=True)  # kg
    activity_level = Column(String(100), nullable=True)
    health_goal = Column(String(255), nullable=True)
    dietary_restrictions = Column(String(1000), nullable=True)
    allergies = Column(String(1000), nullable=True)
    created_at = Column(Date, nullable=True)
    updated_at = Column(Date, nullable=True)


class HealthRecord(Base):
    """ORM model for a dated health measurement of a user."""

    __tablename__ = "health_records"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(255), nullable=False, index=True)
    record_date = Column(Date, nullable=True)
    weight = Column(Float, nullable=True)
    blood_pressure_systolic = Column(Float, nullable=True)
    blood_pressure_diastolic = Column(Float, nullable=True)
    blood_sugar = Column(Float, nullable=True)
    heart_rate = Column(Integer, nullable=True)
    notes = Column(String(500), nullable=True)
    created_at = Column(Date, nullable=True)


def new_health_record(user_id: str, record_date: date = None, **fields) -> HealthRecord:
    """Build a `HealthRecord` with its server-side dates filled in.

    `record_date` falls back to today; `created_at` is always today.
    """
    today = date.today()
    return HealthRecord(
        user_id=user_id,
        record_date=record_date or today,
        created_at=today,
        **fields,
    )
