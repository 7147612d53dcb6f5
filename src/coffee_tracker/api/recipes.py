"""Saved recipe endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from coffee_tracker.api.dependencies import get_container, require_user
from coffee_tracker.api.models import (
    RecipeCreateRequest,
    RecipeResponse,
    RecipeUpdateRequest,
)
from coffee_tracker.containers import AppContainer
from coffee_tracker.domain.models import UserRecord
from coffee_tracker.domain.recipes import RecipeDraft

router = APIRouter(prefix="/api/recipes", tags=["recipes"])

_NOT_FOUND = "Recipe not found"


@router.get("")
async def list_recipes(
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> list[RecipeResponse]:
    """Return the current user's recipes."""
    recipes = container.recipe_service.list_recipes(user.id)
    return [RecipeResponse.from_recipe(recipe) for recipe in recipes]


@router.post("")
async def create_recipe(
    payload: RecipeCreateRequest,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> RecipeResponse:
    """Save a recipe with freshly computed totals."""
    draft = RecipeDraft(**payload.model_dump())
    recipe = container.recipe_service.create_recipe(user.id, draft)
    return RecipeResponse.from_recipe(recipe)


@router.get("/{recipe_id}")
async def get_recipe(
    recipe_id: int,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> RecipeResponse:
    """Return one of the current user's recipes."""
    recipe = container.recipe_service.get_recipe(user.id, recipe_id)
    if recipe is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return RecipeResponse.from_recipe(recipe)


@router.put("/{recipe_id}")
async def update_recipe(
    recipe_id: int,
    payload: RecipeUpdateRequest,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> RecipeResponse:
    """Apply a partial update to a recipe."""
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    recipe = container.recipe_service.update_recipe(user.id, recipe_id, changes)
    if recipe is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return RecipeResponse.from_recipe(recipe)


@router.delete("/{recipe_id}")
async def delete_recipe(
    recipe_id: int,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, bool]:
    """Delete a recipe; logged drinks that used it are kept."""
    if not container.recipe_service.delete_recipe(user.id, recipe_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return {"success": True}
