"""Entity repositories built on `core.repository.BaseRepository`."""

from typing import List, Optional, Dict, Any
from sqlalchemy import func, or_
from sqlalchemy.dialects import postgresql, sqlite
from core.repository import BaseRepository
from core.logger import get_logger
from .models import Recipe, HealthProfile

logger = get_logger("database.repositories")

# Dialects whose INSERT supports ON CONFLICT ... DO UPDATE
_UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class RecipeRepository(BaseRepository[Recipe]):
    """Recipe queries: by category, by calorie range and keyword search."""

    model = Recipe

    def find_by_category(self, category: str) -> List[Recipe]:
        """Return recipes whose category equals `category` exactly."""
        return self.session.query(Recipe).filter(Recipe.category == category).all()

    def find_by_calories_range(self, min_calories: int, max_calories: int) -> List[Recipe]:
        """Return recipes with ``min_calories <= calories <= max_calories``."""
        return (
            self.session.query(Recipe)
            .filter(Recipe.calories.between(min_calories, max_calories))
            .all()
        )

    def search(self, keyword: str) -> List[Recipe]:
        """Case-insensitive substring match over name and description.

        ``%`` and ``_`` in the keyword match literally. Case folding is done
        by the store's ``lower()``; on SQLite that only folds ASCII letters,
        so "crème" does not match "CRÈME".
        """
        needle = keyword.lower()
        return (
            self.session.query(Recipe)
            .filter(or_(
                func.lower(Recipe.name).contains(needle, autoescape=True),
                func.lower(Recipe.description).contains(needle, autoescape=True),
            ))
            .all()
        )


class HealthProfileRepository(BaseRepository[HealthProfile]):
    """Health profile lookups keyed on the user id."""

    model = HealthProfile

    def find_by_user_id(self, user_id: str) -> Optional[HealthProfile]:
        return self.session.query(HealthProfile).filter(HealthProfile.user_id == user_id).first()

    def upsert_by_user_id(self, values: Dict[str, Any]) -> HealthProfile:
        """Insert a profile or replace the one with the same ``user_id``.

        On conflict every column in `values` is overwritten except
        ``user_id`` and ``created_at``, so the row keeps its id and creation
        date. SQLite and PostgreSQL do this in one statement; other dialects
        fall back to a lookup followed by insert or update.

        Args:
            values: Column values, must include ``user_id``.

        Returns:
            The stored profile, re-read from the database.
        """
        user_id = values["user_id"]
        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            return self._upsert_read_then_write(values)

        stmt = insert(HealthProfile).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[HealthProfile.user_id],
            set_={
                key: stmt.excluded[key]
                for key in values
                if key not in ("user_id", "created_at")
            },
        )
        self.session.execute(stmt)
        self.session.commit()
        logger.debug("Upserted health profile for user_id=%s (%s)", user_id, dialect)
        return self.find_by_user_id(user_id)

    def _upsert_read_then_write(self, values: Dict[str, Any]) -> HealthProfile:
        profile = self.find_by_user_id(values["user_id"])
        if profile is None:
            profile = HealthProfile(**values)
        else:
            for key, value in values.items():
                if key != "created_at":
                    setattr(profile, key, value)
        return self.save(profile)
