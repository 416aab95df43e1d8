# Role: Single definition of the arrival/departure partial-day policy. Vehicle, guide and meal costs
# all bill "days", and an afternoon arrival or morning departure shortens the billable service.

from __future__ import annotations

from tour_pricing.models.calculation import FlightTime

HALF_DAY = 0.5
FULL_DAY = 1.0


def adjusted_days(
    base_days: float,
    arrival_time: FlightTime,
    departure_time: FlightTime,
    *,
    first_day: bool,
    last_day: bool,
    unit: float = FULL_DAY,
) -> float:
    """
    Billable days after partial first/last-day adjustments.

    first_day: an afternoon arrival removes `unit` from the count.
    last_day: a morning departure removes `unit` from the count.
    The result is never negative.
    """
    days = float(base_days)
    if first_day and arrival_time == FlightTime.AFTERNOON:
        days -= unit
    if last_day and departure_time == FlightTime.MORNING:
        days -= unit
    return max(0.0, days)


def vehicle_days(base_days: float, arrival_time: FlightTime, departure_time: FlightTime) -> float:
    return adjusted_days(base_days, arrival_time, departure_time, first_day=True, last_day=False, unit=HALF_DAY)


def guide_days(base_days: float, arrival_time: FlightTime, departure_time: FlightTime) -> float:
    return adjusted_days(base_days, arrival_time, departure_time, first_day=True, last_day=False, unit=HALF_DAY)


def lunch_days(base_days: float, arrival_time: FlightTime, departure_time: FlightTime) -> float:
    return adjusted_days(base_days, arrival_time, departure_time, first_day=True, last_day=True, unit=FULL_DAY)


def dinner_days(base_days: float, arrival_time: FlightTime, departure_time: FlightTime) -> float:
    # Dinner is served on arrival and departure days alike.
    return adjusted_days(base_days, arrival_time, departure_time, first_day=False, last_day=False)
