"""Recipes API router.

CRUD, category filter, keyword search and calorie-range endpoints under
``/api/recipes``. The fixed paths (``/search``, ``/calories``,
``/category/...``) are declared before ``/{recipe_id}`` so they win the
route match.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import List
from database.deps import get_db_read, get_db_write
from core.exceptions import NotFoundError
from schemas import RecipeRequest, RecipeResponse
from services.recipe_service import recipe_service

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(payload: RecipeRequest, db: Session = Depends(get_db_write)):
    """Create a recipe and return it with its generated id and timestamps."""
    return recipe_service.create(db, payload)


@router.get("", response_model=List[RecipeResponse])
def list_recipes(db: Session = Depends(get_db_read)):
    return recipe_service.list_all(db)


@router.get("/search", response_model=List[RecipeResponse])
def search_recipes(keyword: str = Query(...), db: Session = Depends(get_db_read)):
    """Return recipes whose name or description contains `keyword`, ignoring case."""
    return recipe_service.search(db, keyword)


@router.get("/calories", response_model=List[RecipeResponse])
def get_recipes_by_calories(
    min_calories: int = Query(..., alias="min"),
    max_calories: int = Query(..., alias="max"),
    db: Session = Depends(get_db_read),
):
    """Return recipes with calories in ``[min, max]``."""
    return recipe_service.list_by_calorie_range(db, min_calories, max_calories)


@router.get("/category/{category}", response_model=List[RecipeResponse])
def get_recipes_by_category(category: str, db: Session = Depends(get_db_read)):
    """Return recipes in `category` (exact, case-sensitive)."""
    return recipe_service.list_by_category(db, category)


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(recipe_id: int, db: Session = Depends(get_db_read)):
    """Return one recipe.

    Raises:
        NotFoundError: If the recipe does not exist.
    """
    recipe = recipe_service.get_by_id(db, recipe_id)
    if recipe is None:
        raise NotFoundError("Recipe", recipe_id)
    return recipe


@router.put("/{recipe_id}", response_model=RecipeResponse)
def update_recipe(recipe_id: int, payload: RecipeRequest, db: Session = Depends(get_db_write)):
    """Replace all mutable fields of a recipe.

    Raises:
        NotFoundError: If the recipe does not exist.
    """
    return recipe_service.update(db, recipe_id, payload)


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe(recipe_id: int, db: Session = Depends(get_db_write)):
    """Delete a recipe. Deleting an unknown id still returns 204."""
    recipe_service.delete(db, recipe_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
