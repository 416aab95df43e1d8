# Role: In-memory catalog + settings store. Owns the keyed lookups the pricing engine needs
# (tour/vehicle/hotel/guide by id, season by month, setting by key) and can be seeded with the
# sample catalog or from a JSON snapshot (the shape a spreadsheet import produces).

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from tour_pricing.models.catalog import Guide, Hotel, Season, Tour, Vehicle

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: Dict[str, str] = {
    "profit_margin": "20",
    "tax_rate": "10",
    "lunchPrice": "2200",
    "dinnerPrice": "3000",
}


class CatalogStore:
    def __init__(
        self,
        *,
        tours: Iterable[Tour] = (),
        vehicles: Iterable[Vehicle] = (),
        hotels: Iterable[Hotel] = (),
        guides: Iterable[Guide] = (),
        seasons: Iterable[Season] = (),
        settings: Optional[Dict[str, str]] = None,
    ) -> None:
        self._tours: Dict[int, Tour] = {t.id: t for t in tours}
        self._vehicles: Dict[int, Vehicle] = {v.id: v for v in vehicles}
        self._hotels: Dict[int, Hotel] = {h.id: h for h in hotels}
        self._guides: Dict[int, Guide] = {g.id: g for g in guides}
        # Key line: insertion order decides which season wins when ranges overlap.
        self._seasons: Dict[int, Season] = {s.id: s for s in seasons}
        self._settings: Dict[str, str] = {k: str(v) for k, v in (settings or {}).items()}

    # --- lookups ---------------------------------------------------------

    def get_tour(self, tour_id: int) -> Optional[Tour]:
        return self._tours.get(tour_id)

    def get_vehicle(self, vehicle_id: int) -> Optional[Vehicle]:
        return self._vehicles.get(vehicle_id)

    def get_hotel(self, hotel_id: int) -> Optional[Hotel]:
        return self._hotels.get(hotel_id)

    def get_guide(self, guide_id: int) -> Optional[Guide]:
        return self._guides.get(guide_id)

    def get_season_by_month(self, month: int) -> Optional[Season]:
        for season in self._seasons.values():
            if season.covers(month):
                return season
        return None

    def get_setting(self, key: str) -> Optional[str]:
        return self._settings.get(key)

    def set_setting(self, key: str, value: str) -> None:
        self._settings[key] = str(value)

    # --- listings --------------------------------------------------------

    def list_tours(self) -> List[Tour]:
        return list(self._tours.values())

    def list_vehicles(self) -> List[Vehicle]:
        return list(self._vehicles.values())

    def list_hotels(self) -> List[Hotel]:
        return list(self._hotels.values())

    def list_guides(self) -> List[Guide]:
        return list(self._guides.values())

    def list_seasons(self) -> List[Season]:
        return list(self._seasons.values())

    # --- construction ----------------------------------------------------

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "CatalogStore":
        # 1) Validate every record through its model (camelCase or snake_case keys)
        # 2) Layer snapshot settings over the defaults
        settings = dict(DEFAULT_SETTINGS)
        settings.update({k: str(v) for k, v in (payload.get("settings") or {}).items()})
        return cls(
            tours=[Tour.model_validate(t) for t in payload.get("tours") or []],
            vehicles=[Vehicle.model_validate(v) for v in payload.get("vehicles") or []],
            hotels=[Hotel.model_validate(h) for h in payload.get("hotels") or []],
            guides=[Guide.model_validate(g) for g in payload.get("guides") or []],
            seasons=[Season.model_validate(s) for s in payload.get("seasons") or []],
            settings=settings,
        )

    @classmethod
    def from_json_file(cls, path: str | Path) -> "CatalogStore":
        path = Path(path)
        with path.open("r", encoding="utf-8") as fh:
            payload = json.load(fh)
        store = cls.from_dict(payload)
        logger.info(
            "Loaded catalog from %s (%d tours, %d vehicles, %d hotels, %d guides, %d seasons)",
            path,
            len(store._tours),
            len(store._vehicles),
            len(store._hotels),
            len(store._guides),
            len(store._seasons),
        )
        return store

    @classmethod
    def with_defaults(cls) -> "CatalogStore":
        return cls(
            tours=[
                Tour(
                    id=1,
                    name="Tokyo Highlights",
                    code="TYO-HL",
                    location="Tokyo",
                    description="Explore the best of Tokyo including Asakusa, Shibuya, and Tokyo Tower.",
                    duration_days=1,
                    base_price=15000,
                ),
                Tour(
                    id=2,
                    name="Kyoto Cultural Tour",
                    code="KYO-CT",
                    location="Kyoto",
                    description="Temples and traditional experiences in the old capital.",
                    duration_days=2,
                    base_price=35000,
                ),
            ],
            vehicles=[
                Vehicle(id=1, name="Small Van (5 seats)", seats=5, luggage_capacity=4,
                        price_per_day=15000, driver_cost_per_day=5000),
                Vehicle(id=2, name="Medium Van (10 seats)", seats=10, luggage_capacity=8,
                        price_per_day=25000, driver_cost_per_day=5000),
                Vehicle(id=3, name="Large Bus (25 seats)", seats=25, luggage_capacity=20,
                        price_per_day=45000, driver_cost_per_day=5000),
            ],
            hotels=[
                Hotel(id=1, name="Tokyo Plaza Hotel", location="Tokyo", stars=3,
                      single_room_price=15000, double_room_price=22000,
                      triple_room_price=30000, breakfast_price=2000),
                Hotel(id=2, name="Kyoto Royal Resort", location="Kyoto", stars=4,
                      single_room_price=25000, double_room_price=35000,
                      triple_room_price=48000, breakfast_price=2500),
            ],
            guides=[
                Guide(id=1, name="Tanaka Yuki", languages=["english", "japanese"], price_per_day=20000),
                Guide(id=2, name="Nguyen Minh", languages=["english", "vietnamese", "japanese"],
                      price_per_day=22000),
            ],
            seasons=[
                Season(id=1, name="Cherry Blossom Season", start_month=3, end_month=5,
                       description="Cherry blossom viewing season.", price_multiplier=1.3),
                Season(id=2, name="Autumn Foliage", start_month=10, end_month=11,
                       description="Autumn colours across Japan.", price_multiplier=1.2),
            ],
            settings=dict(DEFAULT_SETTINGS),
        )
