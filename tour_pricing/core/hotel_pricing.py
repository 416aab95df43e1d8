# Role: Resolves "where do hotel rates come from" into one uniform RoomRates struct.
# A request either names a star tier (fixed company rate table) or a specific hotel record;
# the room-cost arithmetic downstream never branches on which.

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Protocol, Union

from tour_pricing.core.errors import NotFoundError
from tour_pricing.models.calculation import CalculationRequest, RoomType
from tour_pricing.models.catalog import Hotel


@dataclass(frozen=True)
class RoomRates:
    single: float
    double: float
    triple: float
    breakfast: float  # per person per night

    def for_room_type(self, room_type: RoomType) -> float:
        return {
            RoomType.SINGLE: self.single,
            RoomType.DOUBLE: self.double,
            RoomType.TRIPLE: self.triple,
        }[room_type]


# JPY per room-night; each category strictly increases with the star rating.
STAR_TIER_RATES: Dict[int, RoomRates] = {
    3: RoomRates(single=5000, double=7000, triple=9000, breakfast=1200),
    4: RoomRates(single=9000, double=12000, triple=15000, breakfast=1800),
    5: RoomRates(single=18000, double=25000, triple=32000, breakfast=3000),
}


@dataclass(frozen=True)
class StarTier:
    stars: int

    def label(self) -> str:
        return f"stars:{self.stars}"


@dataclass(frozen=True)
class SpecificHotel:
    hotel_id: int

    def label(self) -> str:
        return f"hotel:{self.hotel_id}"


HotelPricingSource = Union[StarTier, SpecificHotel]


class HotelLookup(Protocol):
    def get_hotel(self, hotel_id: int) -> Optional[Hotel]: ...


def pricing_source_for(request: CalculationRequest) -> Optional[HotelPricingSource]:
    # Key line: a star tier wins over a hotel id when both are sent.
    if request.hotel_stars is not None:
        return StarTier(stars=request.hotel_stars)
    if request.hotel_id is not None:
        return SpecificHotel(hotel_id=request.hotel_id)
    return None


def resolve_room_rates(source: HotelPricingSource, catalog: HotelLookup) -> RoomRates:
    if isinstance(source, StarTier):
        rates = STAR_TIER_RATES.get(source.stars)
        if rates is None:
            raise ValueError(f"No star-tier rates for {source.stars} stars")
        return rates

    hotel = catalog.get_hotel(source.hotel_id)
    if hotel is None:
        raise NotFoundError("hotel", source.hotel_id)
    return RoomRates(
        single=hotel.single_room_price,
        double=hotel.double_room_price,
        triple=hotel.triple_room_price,
        breakfast=hotel.breakfast_price,
    )
