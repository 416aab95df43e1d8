# Role: Process-wide wiring. Builds the catalog, the FX converter, the calculator and the assistant once,
# and exposes them through getter functions so routes use Depends() and tests can override them.

from __future__ import annotations

import logging

import tour_pricing.config as config
from tour_pricing.core.catalog_store import CatalogStore
from tour_pricing.core.currency_converter import CurrencyConverter
from tour_pricing.core.pricing_engine import PriceCalculator
from tour_pricing.core.quote_assistant import QuoteAssistant
from tour_pricing.core.validator import Validator

logger = logging.getLogger(__name__)


def build_catalog() -> CatalogStore:
    if config.CATALOG_PATH:
        return CatalogStore.from_json_file(config.CATALOG_PATH)
    logger.info("CATALOG_PATH not set; using the built-in sample catalog")
    return CatalogStore.with_defaults()


catalog = build_catalog()
currency_converter = CurrencyConverter()
price_calculator = PriceCalculator(catalog, converter=currency_converter)
validator = Validator()
quote_assistant = QuoteAssistant()


def get_catalog() -> CatalogStore:
    return catalog


def get_currency_converter() -> CurrencyConverter:
    return currency_converter


def get_price_calculator() -> PriceCalculator:
    return price_calculator


def get_validator() -> Validator:
    return validator


def get_quote_assistant() -> QuoteAssistant:
    return quote_assistant
