# Role: Catalog entities read by the pricing engine. These are the records an admin maintains
# (tours, vehicles, hotels, guides, seasons); the engine only ever reads them.

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from tour_pricing.models.base import CamelModel


class Tour(CamelModel):
    id: int
    name: str
    code: str = ""
    location: str
    description: str = ""
    duration_days: int = Field(default=1, ge=1)  # nominal; priced duration comes from the request dates
    base_price: float = Field(ge=0)  # JPY per participant
    image_url: Optional[str] = None


class Vehicle(CamelModel):
    id: int
    name: str
    seats: int = Field(ge=1)
    luggage_capacity: int = Field(default=0, ge=0)
    price_per_day: float = Field(ge=0)
    driver_cost_per_day: float = Field(ge=0)


class Hotel(CamelModel):
    id: int
    name: str
    location: str = ""
    stars: int = Field(ge=1, le=5)
    single_room_price: float = Field(ge=0)
    double_room_price: float = Field(ge=0)
    triple_room_price: float = Field(ge=0)
    breakfast_price: float = Field(default=0, ge=0)
    image_url: Optional[str] = None


class Guide(CamelModel):
    id: int
    name: str
    languages: List[str] = Field(default_factory=list)
    price_per_day: float = Field(ge=0)
    experience: int = Field(default=0, ge=0)
    has_international_license: bool = False


class Season(CamelModel):
    id: int
    name: str
    start_month: int = Field(ge=1, le=12)
    end_month: int = Field(ge=1, le=12)
    description: str = ""
    price_multiplier: float = Field(default=1.0, gt=0)

    def covers(self, month: int) -> bool:
        # Key line: a range like Dec -> Feb wraps across the new year.
        if self.start_month <= self.end_month:
            return self.start_month <= month <= self.end_month
        return month >= self.start_month or month <= self.end_month
