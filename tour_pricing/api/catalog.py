# Role: Read-only catalog endpoints the calculator UI uses to populate its choices
# (tours, vehicles, hotels, guides, seasons) and to show the current tax/margin settings.

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from tour_pricing.api.deps import get_catalog
from tour_pricing.core.catalog_store import CatalogStore
from tour_pricing.models.catalog import Guide, Hotel, Season, Tour, Vehicle

router = APIRouter(prefix="/api", tags=["catalog"])


class SettingResponse(BaseModel):
    key: str
    value: str


@router.get("/tours", response_model=List[Tour])
def list_tours(catalog: CatalogStore = Depends(get_catalog)) -> List[Tour]:
    return catalog.list_tours()


@router.get("/tours/{tour_id}", response_model=Tour)
def get_tour(tour_id: int, catalog: CatalogStore = Depends(get_catalog)) -> Tour:
    tour = catalog.get_tour(tour_id)
    if tour is None:
        raise HTTPException(status_code=404, detail="Tour not found")
    return tour


@router.get("/vehicles", response_model=List[Vehicle])
def list_vehicles(catalog: CatalogStore = Depends(get_catalog)) -> List[Vehicle]:
    return catalog.list_vehicles()


@router.get("/hotels", response_model=List[Hotel])
def list_hotels(catalog: CatalogStore = Depends(get_catalog)) -> List[Hotel]:
    return catalog.list_hotels()


@router.get("/guides", response_model=List[Guide])
def list_guides(catalog: CatalogStore = Depends(get_catalog)) -> List[Guide]:
    return catalog.list_guides()


@router.get("/seasons", response_model=List[Season])
def list_seasons(catalog: CatalogStore = Depends(get_catalog)) -> List[Season]:
    return catalog.list_seasons()


@router.get("/settings/{key}", response_model=SettingResponse)
def get_setting(key: str, catalog: CatalogStore = Depends(get_catalog)) -> SettingResponse:
    value = catalog.get_setting(key)
    if value is None:
        raise HTTPException(status_code=404, detail="Setting not found")
    return SettingResponse(key=key, value=value)
