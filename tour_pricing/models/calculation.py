# Role: Wire contract of the calculator. CalculationRequest is the validated, immutable input the engine
# consumes; CalculationResult is the cost breakdown returned to the client (all costs in JPY).

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Literal, Optional

from pydantic import ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from tour_pricing.models.base import CamelModel
from tour_pricing.models.currency import Currency


class FlightTime(str, Enum):
    MORNING = "morning"      # before noon
    AFTERNOON = "afternoon"  # after noon
    UNKNOWN = "unknown"


class RoomType(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"


HotelStars = Literal[3, 4, 5]


class SpecialServices(CamelModel):
    # Echoed back with the quote; these extras are arranged and priced separately.
    geisha_show: bool = False
    kimono_experience: bool = False
    tea_ceremony: bool = False
    wagyu_dinner: bool = False
    sumo_show: bool = False
    disneyland_tickets: bool = False
    universal_studio_tickets: bool = False
    airport_transfer: bool = False
    notes: Optional[str] = None


class CalculationRequest(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    tour_id: int = Field(ge=1)
    vehicle_id: int = Field(ge=1)

    start_date: date
    end_date: date

    participants: int = Field(ge=1)
    vehicle_count: int = Field(default=1, ge=1)

    arrival_time: FlightTime = FlightTime.UNKNOWN
    departure_time: FlightTime = FlightTime.UNKNOWN

    hotel_stars: Optional[HotelStars] = None
    hotel_id: Optional[int] = Field(default=None, ge=1)

    room_type: Optional[RoomType] = None
    single_room_count: Optional[int] = Field(default=None, ge=0)
    double_room_count: Optional[int] = Field(default=None, ge=0)
    triple_room_count: Optional[int] = Field(default=None, ge=0)

    include_breakfast: bool = False
    include_lunch: bool = False
    include_dinner: bool = False
    include_guide: bool = False
    guide_id: Optional[int] = Field(default=None, ge=1, validate_default=True)

    currency: Currency = Currency.JPY

    special_services: Optional[SpecialServices] = None

    @field_validator("end_date")
    @classmethod
    def _end_not_before_start(cls, value: date, info: ValidationInfo) -> date:
        start = info.data.get("start_date")
        if start is not None and value < start:
            raise ValueError("endDate must be on or after startDate")
        return value

    @field_validator("guide_id")
    @classmethod
    def _guide_required_when_included(cls, value: Optional[int], info: ValidationInfo) -> Optional[int]:
        # Key line: include_guide is declared before guide_id, so it is already in info.data.
        if info.data.get("include_guide") and value is None:
            raise ValueError("guideId is required when includeGuide is true")
        return value

    def has_explicit_room_counts(self) -> bool:
        counts = (self.single_room_count, self.double_room_count, self.triple_room_count)
        return any(c for c in counts if c)

    def has_room_configuration(self) -> bool:
        return self.room_type is not None or self.has_explicit_room_counts()


class TourDetails(CamelModel):
    id: int
    name: str
    location: str
    code: str
    duration_days: int


class SeasonInfo(CamelModel):
    name: str
    multiplier: float


class CalculationDetails(CamelModel):
    start_date: date
    end_date: date
    participants: int
    vehicle_count: int
    arrival_time: FlightTime
    departure_time: FlightTime
    hotel_pricing: Optional[str] = None
    season: Optional[SeasonInfo] = None
    special_services: Optional[SpecialServices] = None


class CostBreakdown(CamelModel):
    base_cost: float
    vehicle_cost: float
    driver_cost: float
    hotel_cost: float
    meals_cost: float
    guide_cost: float
    subtotal: float
    profit_amount: float
    tax_amount: float
    total_amount: float


class CalculationResult(CamelModel):
    tour_details: TourDetails
    calculation_details: CalculationDetails
    costs: CostBreakdown
    currency: Currency
    total_in_requested_currency: float
