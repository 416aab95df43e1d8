# Role: Thin HTTP adapter for the tour price calculator. Runs request validation, then hands the
# validated request to PriceCalculator; error-to-status mapping lives in main.py.

from typing import Any

from fastapi import APIRouter, Body, Depends

from tour_pricing.api.deps import get_price_calculator, get_validator
from tour_pricing.core.pricing_engine import PriceCalculator
from tour_pricing.core.validator import Validator
from tour_pricing.models.calculation import CalculationResult

router = APIRouter(prefix="/api", tags=["calculator"])


@router.post("/calculator", response_model=CalculationResult)
def calculate(
    payload: Any = Body(...),
    validator: Validator = Depends(get_validator),
    calculator: PriceCalculator = Depends(get_price_calculator),
) -> CalculationResult:
    # 1) Validate the raw body (field-level errors -> 400)
    # 2) Price it (unknown tour/vehicle/guide/hotel -> 404)
    request = validator.validate(payload)
    return calculator.calculate(request)
