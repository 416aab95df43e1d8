import unittest

from tour_pricing.models.calculation import FlightTime
from tour_pricing.utils.day_adjustments import (
    adjusted_days,
    dinner_days,
    guide_days,
    lunch_days,
    vehicle_days,
)

AM = FlightTime.MORNING
PM = FlightTime.AFTERNOON
UNKNOWN = FlightTime.UNKNOWN


class AdjustedDaysTests(unittest.TestCase):
    def test_no_adjustment_without_flight_times(self):
        self.assertEqual(adjusted_days(4, UNKNOWN, UNKNOWN, first_day=True, last_day=True), 4.0)

    def test_flags_gate_each_end(self):
        self.assertEqual(adjusted_days(4, PM, AM, first_day=False, last_day=True), 3.0)
        self.assertEqual(adjusted_days(4, PM, AM, first_day=True, last_day=False), 3.0)
        self.assertEqual(adjusted_days(4, PM, AM, first_day=True, last_day=True), 2.0)

    def test_morning_arrival_and_afternoon_departure_are_full_days(self):
        self.assertEqual(adjusted_days(3, AM, PM, first_day=True, last_day=True), 3.0)

    def test_never_negative(self):
        self.assertEqual(adjusted_days(1, PM, AM, first_day=True, last_day=True), 0.0)


class ServiceDayTests(unittest.TestCase):
    def test_vehicle_and_guide_lose_half_a_day_on_afternoon_arrival(self):
        self.assertEqual(vehicle_days(3, PM, UNKNOWN), 2.5)
        self.assertEqual(guide_days(3, PM, UNKNOWN), 2.5)

    def test_vehicle_and_guide_ignore_departure(self):
        self.assertEqual(vehicle_days(3, UNKNOWN, AM), 3.0)
        self.assertEqual(guide_days(3, UNKNOWN, AM), 3.0)

    def test_lunch_loses_whole_days_at_both_ends(self):
        self.assertEqual(lunch_days(4, PM, AM), 2.0)
        self.assertEqual(lunch_days(4, PM, UNKNOWN), 3.0)
        self.assertEqual(lunch_days(1, PM, AM), 0.0)

    def test_dinner_is_never_adjusted(self):
        self.assertEqual(dinner_days(4, PM, AM), 4.0)

    def test_single_day_afternoon_arrival(self):
        self.assertEqual(vehicle_days(1, PM, UNKNOWN), 0.5)
        self.assertEqual(lunch_days(1, PM, UNKNOWN), 0.0)


if __name__ == "__main__":
    unittest.main()
