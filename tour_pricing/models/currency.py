# Role: Supported quote currencies and the hardcoded JPY-relative rates used until (or instead of)
# a successful refresh from the external rate provider.

from enum import Enum
from typing import Dict


class Currency(str, Enum):
    JPY = "JPY"
    USD = "USD"
    VND = "VND"
    CNY = "CNY"
    KRW = "KRW"


BASE_CURRENCY = Currency.JPY

# Units of each currency per 1 JPY.
DEFAULT_RATES: Dict[str, float] = {
    "JPY": 1.0,
    "USD": 0.0067,
    "VND": 161.83,
    "CNY": 0.048,
    "KRW": 9.12,
}

SUPPORTED_CODES = frozenset(c.value for c in Currency)
