"""Recipe service.

Thin layer between the recipes router and `RecipeRepository`: stamps
timestamps, copies request fields onto the ORM object and raises
`NotFoundError` when an update targets a missing recipe.
"""

from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from core.exceptions import NotFoundError
from core.logger import get_logger
from database.models import Recipe
from database.repositories import RecipeRepository
from schemas.recipe_schema import RecipeRequest

logger = get_logger("services.recipe_service")

# Fields a client may set; id and timestamps are server-owned
MUTABLE_FIELDS = (
    "name",
    "description",
    "ingredients",
    "instructions",
    "calories",
    "protein",
    "carbohydrates",
    "fat",
    "preparation_time",
    "difficulty",
    "category",
    "tags",
    "image_url",
)


def new_recipe(payload: RecipeRequest, now: Optional[datetime] = None) -> Recipe:
    """Build an unsaved `Recipe` with ``created_at == updated_at``."""
    now = now or datetime.now()
    recipe = Recipe(created_at=now, updated_at=now)
    for field in MUTABLE_FIELDS:
        setattr(recipe, field, getattr(payload, field))
    return recipe


class RecipeService:
    """CRUD and search operations over recipes."""

    def create(self, db: Session, payload: RecipeRequest) -> Recipe:
        recipe = RecipeRepository(db).save(new_recipe(payload))
        logger.info("Recipe %s created with id=%s", recipe.name, recipe.id)
        return recipe

    def get_by_id(self, db: Session, recipe_id: int) -> Optional[Recipe]:
        return RecipeRepository(db).get_by_id(recipe_id)

    def list_all(self, db: Session) -> List[Recipe]:
        return RecipeRepository(db).get_all()

    def list_by_category(self, db: Session, category: str) -> List[Recipe]:
        return RecipeRepository(db).find_by_category(category)

    def search(self, db: Session, keyword: str) -> List[Recipe]:
        recipes = RecipeRepository(db).search(keyword)
        logger.debug("Search %r matched %s recipes", keyword, len(recipes))
        return recipes

    def list_by_calorie_range(self, db: Session, min_calories: int, max_calories: int) -> List[Recipe]:
        """Recipes within the inclusive range. An inverted range matches nothing."""
        return RecipeRepository(db).find_by_calories_range(min_calories, max_calories)

    def update(self, db: Session, recipe_id: int, payload: RecipeRequest) -> Recipe:
        """Replace every mutable field of a recipe with the payload values.

        Fields missing from the payload are set to null; this is a full
        replace, not a patch.

        Raises:
            NotFoundError: If no recipe has this id.
        """
        repo = RecipeRepository(db)
        recipe = repo.get_by_id(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe", recipe_id)
        for field in MUTABLE_FIELDS:
            setattr(recipe, field, getattr(payload, field))
        recipe.updated_at = datetime.now()
        recipe = repo.save(recipe)
        logger.info("Recipe id=%s updated", recipe.id)
        return recipe

    def delete(self, db: Session, recipe_id: int) -> None:
        """Delete a recipe. Unknown ids are ignored."""
        if RecipeRepository(db).delete_by_id(recipe_id):
            logger.info("Recipe id=%s deleted", recipe_id)
        else:
            logger.info("Recipe id=%s not found, nothing to delete", recipe_id)


recipe_service = RecipeService()
__all__ = ["RecipeService", "recipe_service", "new_recipe"]
