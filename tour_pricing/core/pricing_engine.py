# Role: The price calculation engine. Takes a validated CalculationRequest, reads the catalog and
# company settings, and layers the costs: base -> vehicle/driver -> hotel -> meals -> guide ->
# season multiplier -> profit margin -> tax -> currency conversion. Pure apart from the FX cache.

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Optional, Protocol

from tour_pricing.core.currency_converter import CurrencyConverter
from tour_pricing.core.errors import ComputationError, NotFoundError
from tour_pricing.core.hotel_pricing import HotelLookup, RoomRates, pricing_source_for, resolve_room_rates
from tour_pricing.core.settings_reader import SettingsReader, SettingsSource
from tour_pricing.models.calculation import (
    CalculationDetails,
    CalculationRequest,
    CalculationResult,
    CostBreakdown,
    RoomType,
    SeasonInfo,
    TourDetails,
)
from tour_pricing.models.catalog import Guide, Season, Tour, Vehicle
from tour_pricing.models.currency import BASE_CURRENCY
from tour_pricing.utils import day_adjustments

logger = logging.getLogger(__name__)


class CatalogAccess(HotelLookup, SettingsSource, Protocol):
    def get_tour(self, tour_id: int) -> Optional[Tour]: ...

    def get_vehicle(self, vehicle_id: int) -> Optional[Vehicle]: ...

    def get_guide(self, guide_id: int) -> Optional[Guide]: ...

    def get_season_by_month(self, month: int) -> Optional[Season]: ...


def duration_in_days(start: date, end: date) -> int:
    # Whole calendar days between the dates, never less than one service day.
    return max(1, math.ceil((end - start).days))


def rooms_needed(room_type: RoomType, participants: int) -> int:
    if room_type == RoomType.SINGLE:
        return participants
    if room_type == RoomType.DOUBLE:
        return math.ceil(participants / 2)
    return math.ceil(participants / 3)


@dataclass(frozen=True)
class _MealPlan:
    lunch_price: float
    dinner_price: float
    lunch_days: float
    dinner_days: float

    def per_person(self) -> float:
        return self.lunch_price * self.lunch_days + self.dinner_price * self.dinner_days


class PriceCalculator:
    def __init__(
        self,
        catalog: CatalogAccess,
        settings: Optional[SettingsReader] = None,
        converter: Optional[CurrencyConverter] = None,
    ) -> None:
        # Key line: dependencies are injectable; settings default to the catalog's own settings table.
        self.catalog = catalog
        self.settings = settings or SettingsReader(catalog)
        self.converter = converter or CurrencyConverter()

    def calculate(self, request: CalculationRequest) -> CalculationResult:
        tour = self.catalog.get_tour(request.tour_id)
        if tour is None:
            raise NotFoundError("tour", request.tour_id)
        vehicle = self.catalog.get_vehicle(request.vehicle_id)
        if vehicle is None:
            raise NotFoundError("vehicle", request.vehicle_id)

        guide: Optional[Guide] = None
        if request.include_guide:
            guide = self.catalog.get_guide(request.guide_id) if request.guide_id is not None else None
            if guide is None:
                raise NotFoundError("guide", request.guide_id)

        participants = request.participants
        arrival, departure = request.arrival_time, request.departure_time

        # 1) Duration and season
        duration = duration_in_days(request.start_date, request.end_date)
        season = self.catalog.get_season_by_month(request.start_date.month)
        season_multiplier = season.price_multiplier if season else 1.0

        # 2) Base, vehicle and driver
        base_cost = tour.base_price * participants

        billable_vehicle_days = day_adjustments.vehicle_days(duration, arrival, departure)
        vehicle_cost = vehicle.price_per_day * billable_vehicle_days * request.vehicle_count
        driver_cost = vehicle.driver_cost_per_day * billable_vehicle_days * request.vehicle_count

        # 3) Hotel (participants, plus the guide's single room further down)
        hotel_cost = 0.0
        num_nights = duration - 1
        source = pricing_source_for(request)
        rates: Optional[RoomRates] = None
        if source is not None and request.has_room_configuration():
            rates = resolve_room_rates(source, self.catalog)
            if num_nights > 0:
                hotel_cost = self._participant_hotel_cost(request, rates, num_nights)
            else:
                rates = None

        # 4) Meals
        meals = self._meal_plan(request, duration)
        meals_cost = 0.0
        if meals is not None:
            meals_cost = meals.per_person() * participants

        # 5) Guide: fee by (half-)day, plus one single room and one meal set of their own
        guide_cost = 0.0
        if guide is not None:
            guide_cost = guide.price_per_day * day_adjustments.guide_days(duration, arrival, departure)
            if rates is not None:
                hotel_cost += rates.single * num_nights
                if request.include_breakfast:
                    hotel_cost += rates.breakfast * num_nights
            if meals is not None:
                meals_cost += meals.per_person()

        # 6) Season, margin, tax
        subtotal = (base_cost + vehicle_cost + driver_cost + hotel_cost + meals_cost + guide_cost) * season_multiplier
        profit_amount = subtotal * self.settings.profit_margin_rate()
        total_before_tax = subtotal + profit_amount
        tax_amount = total_before_tax * self.settings.tax_rate()
        total_amount = total_before_tax + tax_amount

        costs = CostBreakdown(
            base_cost=base_cost,
            vehicle_cost=vehicle_cost,
            driver_cost=driver_cost,
            hotel_cost=hotel_cost,
            meals_cost=meals_cost,
            guide_cost=guide_cost,
            subtotal=subtotal,
            profit_amount=profit_amount,
            tax_amount=tax_amount,
            total_amount=total_amount,
        )
        self._check_costs(costs)

        # 7) Currency
        if request.currency == BASE_CURRENCY:
            total_in_currency = total_amount
        else:
            total_in_currency = self.converter.convert(total_amount, BASE_CURRENCY.value, request.currency.value)

        logger.debug(
            "Quote tour=%s days=%s season=%s costs=%s total=%s %s",
            tour.id,
            duration,
            season.name if season else None,
            costs.model_dump(),
            total_in_currency,
            request.currency.value,
        )

        return CalculationResult(
            tour_details=TourDetails(
                id=tour.id,
                name=tour.name,
                location=tour.location,
                code=tour.code,
                duration_days=duration,
            ),
            calculation_details=CalculationDetails(
                start_date=request.start_date,
                end_date=request.end_date,
                participants=participants,
                vehicle_count=request.vehicle_count,
                arrival_time=arrival,
                departure_time=departure,
                hotel_pricing=source.label() if source is not None and request.has_room_configuration() else None,
                season=SeasonInfo(name=season.name, multiplier=season.price_multiplier) if season else None,
                special_services=request.special_services,
            ),
            costs=costs,
            currency=request.currency,
            total_in_requested_currency=total_in_currency,
        )

    def _participant_hotel_cost(self, request: CalculationRequest, rates: RoomRates, num_nights: int) -> float:
        # Explicit room counts win over a room type derived from the head count.
        if request.has_explicit_room_counts():
            per_night = (
                (request.single_room_count or 0) * rates.single
                + (request.double_room_count or 0) * rates.double
                + (request.triple_room_count or 0) * rates.triple
            )
            cost = per_night * num_nights
        elif request.room_type is not None:
            num_rooms = rooms_needed(request.room_type, request.participants)
            cost = rates.for_room_type(request.room_type) * num_rooms * num_nights
        else:
            cost = 0.0

        if request.include_breakfast:
            cost += rates.breakfast * request.participants * num_nights
        return cost

    def _meal_plan(self, request: CalculationRequest, duration: int) -> Optional[_MealPlan]:
        if not (request.include_lunch or request.include_dinner):
            return None
        arrival, departure = request.arrival_time, request.departure_time
        return _MealPlan(
            lunch_price=self.settings.lunch_price() if request.include_lunch else 0.0,
            dinner_price=self.settings.dinner_price() if request.include_dinner else 0.0,
            lunch_days=day_adjustments.lunch_days(duration, arrival, departure),
            dinner_days=day_adjustments.dinner_days(duration, arrival, departure),
        )

    def _check_costs(self, costs: CostBreakdown) -> None:
        # Fail fast: a negative or NaN price is a defect, not something to hand a customer.
        for name, value in costs.model_dump().items():
            if not math.isfinite(value) or value < 0:
                raise ComputationError(f"{name} is {value!r}")
