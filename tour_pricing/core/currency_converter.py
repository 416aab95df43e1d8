# Role: JPY-relative rate table with a time-guarded cache. Converts quote totals between supported
# currencies and refreshes from the rate provider opportunistically. Availability wins over freshness:
# a failed refresh is logged and the last-known (or default) rates keep serving.

from __future__ import annotations

import logging
import math
import time
from datetime import datetime, timezone
from typing import Callable, Dict, Optional

import tour_pricing.config as config
from tour_pricing.core.errors import UnsupportedCurrencyError
from tour_pricing.models.currency import BASE_CURRENCY, DEFAULT_RATES, SUPPORTED_CODES
from tour_pricing.tools.exchange_rate_client import ExchangeRateClient

logger = logging.getLogger(__name__)


class CurrencyConverter:
    def __init__(
        self,
        client: Optional[ExchangeRateClient] = None,
        *,
        max_age_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.time,
        initial_rates: Optional[Dict[str, float]] = None,
        auto_refresh: bool = True,
    ) -> None:
        # Key line: the client and clock are injectable so tests run with deterministic rates and time.
        self._client = client or ExchangeRateClient()
        self._max_age = max_age_seconds if max_age_seconds is not None else config.FX_REFRESH_SECONDS
        self._clock = clock
        self._auto_refresh = auto_refresh

        self._rates: Dict[str, float] = dict(DEFAULT_RATES)
        if initial_rates:
            self._rates.update({k.upper(): float(v) for k, v in initial_rates.items()})
        self._rates[BASE_CURRENCY.value] = 1.0

        self._last_updated: Optional[float] = None
        self._last_attempt: Optional[float] = None

    @property
    def last_updated(self) -> Optional[datetime]:
        if self._last_updated is None:
            return None
        return datetime.fromtimestamp(self._last_updated, tz=timezone.utc)

    def is_stale(self) -> bool:
        # Time since the last attempt, not the last success: a failing provider is retried next cycle.
        if self._last_attempt is None:
            return True
        return (self._clock() - self._last_attempt) > self._max_age

    def refresh(self) -> bool:
        # 1) Ask the provider for the latest JPY table
        # 2) On failure: log + keep current rates
        # 3) On success: merge supported codes with sane values only
        self._last_attempt = self._clock()
        result = self._client.fetch_rates()
        if not result.ok:
            logger.warning("Exchange rate refresh failed, keeping cached rates: %s", result.error)
            return False

        updated = []
        for code in SUPPORTED_CODES:
            if code == BASE_CURRENCY.value:
                continue
            value = result.rates.get(code)
            if value is None or not math.isfinite(value) or value <= 0:
                continue
            self._rates[code] = value
            updated.append(code)

        if not updated:
            logger.warning("Exchange rate refresh returned no usable rates for %s", sorted(SUPPORTED_CODES))
            return False

        self._last_updated = self._last_attempt
        logger.info("Exchange rates refreshed: %s", ", ".join(f"{c}={self._rates[c]}" for c in sorted(updated)))
        return True

    def get_rates(self) -> Dict[str, float]:
        self._refresh_if_stale()
        return dict(self._rates)

    def convert(self, amount: float, from_code: str, to_code: str) -> float:
        from_code = self._normalize(from_code)
        to_code = self._normalize(to_code)

        if from_code == to_code:
            return amount

        self._refresh_if_stale()
        rates = self._rates

        if from_code == BASE_CURRENCY.value:
            return amount * rates[to_code]
        if to_code == BASE_CURRENCY.value:
            return amount / rates[from_code]

        # Cross rate through JPY.
        amount_in_base = amount / rates[from_code]
        return amount_in_base * rates[to_code]

    def _refresh_if_stale(self) -> None:
        if self._auto_refresh and self.is_stale():
            self.refresh()

    def _normalize(self, code: str) -> str:
        normalized = (code.value if hasattr(code, "value") else str(code or "")).strip().upper()
        if normalized not in SUPPORTED_CODES:
            raise UnsupportedCurrencyError(normalized or str(code))
        return normalized
