# Role: Typed view over the string settings table. Parses the numeric company settings the engine needs
# and falls back to documented defaults when a key is unset or holds garbage.

from __future__ import annotations

import logging
import math
from typing import Optional, Protocol, Sequence

logger = logging.getLogger(__name__)

DEFAULT_PROFIT_MARGIN_PERCENT = 20.0
DEFAULT_TAX_RATE_PERCENT = 10.0
DEFAULT_LUNCH_PRICE = 2200.0
DEFAULT_DINNER_PRICE = 3000.0


class SettingsSource(Protocol):
    def get_setting(self, key: str) -> Optional[str]: ...


class SettingsReader:
    def __init__(self, source: SettingsSource) -> None:
        self._source = source

    def get_float(self, key: str, default: float) -> float:
        return self._first_float((key,), default)

    def profit_margin_rate(self) -> float:
        # Stored as a percentage ("20"), used as a rate (0.20).
        return self.get_float("profit_margin", DEFAULT_PROFIT_MARGIN_PERCENT) / 100.0

    def tax_rate(self) -> float:
        return self.get_float("tax_rate", DEFAULT_TAX_RATE_PERCENT) / 100.0

    def lunch_price(self) -> float:
        return self._first_float(("lunchPrice", "meal_cost_lunch"), DEFAULT_LUNCH_PRICE)

    def dinner_price(self) -> float:
        return self._first_float(("dinnerPrice", "meal_cost_dinner"), DEFAULT_DINNER_PRICE)

    def _first_float(self, keys: Sequence[str], default: float) -> float:
        # 1) Take the first key that is present
        # 2) Parse it; reject negatives/NaN/inf
        # 3) Anything unusable -> default (with a warning)
        for key in keys:
            raw = self._source.get_setting(key)
            if raw is None or not str(raw).strip():
                continue
            try:
                value = float(str(raw).strip())
            except ValueError:
                logger.warning("Setting %s=%r is not a number; using default %s", key, raw, default)
                return default
            if not math.isfinite(value) or value < 0:
                logger.warning("Setting %s=%r is out of range; using default %s", key, raw, default)
                return default
            return value
        return default
