# Role: External tool adapter for exchange rates. Calls the JPY-based rate provider and returns a
# structured result; network and payload problems come back as ok=False, never as exceptions.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

import requests

import tour_pricing.config as config


@dataclass(frozen=True)
class RatesFetchResult:
    ok: bool
    rates: Dict[str, float] = field(default_factory=dict)
    error: Optional[str] = None


class ExchangeRateClient:
    def __init__(self, url: Optional[str] = None, timeout_seconds: Optional[float] = None) -> None:
        self.url = url or config.FX_RATES_URL
        self.timeout_seconds = timeout_seconds if timeout_seconds is not None else config.FX_TIMEOUT_SECONDS

    def fetch_rates(self) -> RatesFetchResult:
        # 1) GET the latest JPY-based table (bounded by timeout)
        # 2) Pull the "rates" map out of the body
        # 3) Keep numeric entries only; upper-case the codes
        try:
            r = requests.get(self.url, timeout=self.timeout_seconds)
            r.raise_for_status()
            payload = r.json()
        except requests.RequestException as e:
            return RatesFetchResult(ok=False, error=f"Rate provider request failed: {e}")
        except ValueError as e:
            return RatesFetchResult(ok=False, error=f"Bad rate provider payload: {e}")

        raw_rates = payload.get("rates") if isinstance(payload, dict) else None
        if not isinstance(raw_rates, dict) or not raw_rates:
            return RatesFetchResult(ok=False, error="Rate provider payload has no 'rates' map")

        rates: Dict[str, float] = {}
        for code, value in raw_rates.items():
            try:
                rates[str(code).upper()] = float(value)
            except (TypeError, ValueError):
                continue

        return RatesFetchResult(ok=True, rates=rates)
