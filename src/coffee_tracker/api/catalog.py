"""Public catalog, nutrition preview and brewing guide endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from coffee_tracker.api.dependencies import get_container
from coffee_tracker.api.models import (
    BrewingMethodResponse,
    CatalogResponse,
    NutritionRequest,
    NutritionResponse,
)
from coffee_tracker.containers import AppContainer

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/catalog")
async def catalog(
    container: AppContainer = Depends(get_container),
) -> CatalogResponse:
    """Return coffee types, milks and toppings."""
    return CatalogResponse.from_catalog(container.nutrition_service.catalog)


@router.post("/nutrition")
async def preview_nutrition(
    payload: NutritionRequest, container: AppContainer = Depends(get_container)
) -> NutritionResponse:
    """Compute totals for a drink without saving it."""
    totals = container.nutrition_service.compute(
        payload.coffee_type,
        payload.milk_type,
        payload.sweetness_level,
        payload.toppings,
    )
    return NutritionResponse(
        calories=totals.calories,
        caffeine=totals.caffeine,
        sugar=totals.sugar,
        protein=totals.protein,
    )


@router.get("/brewing-methods")
async def list_brewing_methods(
    container: AppContainer = Depends(get_container),
) -> list[BrewingMethodResponse]:
    """Return every brewing guide."""
    methods = container.brewing_service.list_methods()
    return [BrewingMethodResponse.from_method(method) for method in methods]


@router.get("/brewing-methods/{method_id}")
async def get_brewing_method(
    method_id: int, container: AppContainer = Depends(get_container)
) -> BrewingMethodResponse:
    """Return a single brewing guide."""
    method = container.brewing_service.get_method(method_id)
    if method is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Brewing method not found"
        )
    return BrewingMethodResponse.from_method(method)
