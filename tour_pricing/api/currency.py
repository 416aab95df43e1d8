# Role: Currency endpoints for the client: ad-hoc conversion between supported currencies and a
# read-only view of the rate table the calculator is currently using.

import math
from typing import Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field

from tour_pricing.api.deps import get_currency_converter
from tour_pricing.core.currency_converter import CurrencyConverter

router = APIRouter(prefix="/api/currency", tags=["currency"])


class ConversionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_currency: str = Field(serialization_alias="from")
    to_currency: str = Field(serialization_alias="to")
    amount: float
    converted_amount: float = Field(serialization_alias="convertedAmount")


class RatesResponse(BaseModel):
    base: str = "JPY"
    rates: Dict[str, float]
    last_updated: Optional[str] = Field(default=None, serialization_alias="lastUpdated")


@router.get("/convert", response_model=ConversionResponse)
def convert(
    amount: str = Query(...),
    from_currency: str = Query(..., alias="from"),
    to_currency: str = Query(..., alias="to"),
    converter: CurrencyConverter = Depends(get_currency_converter),
) -> ConversionResponse:
    try:
        value = float(amount)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid amount")
    if not math.isfinite(value):
        raise HTTPException(status_code=400, detail="Invalid amount")

    converted = converter.convert(value, from_currency, to_currency)
    return ConversionResponse(
        from_currency=from_currency.upper(),
        to_currency=to_currency.upper(),
        amount=value,
        converted_amount=converted,
    )


@router.get("/rates", response_model=RatesResponse)
def rates(converter: CurrencyConverter = Depends(get_currency_converter)) -> RatesResponse:
    table = converter.get_rates()
    updated = converter.last_updated
    return RatesResponse(rates=table, last_updated=updated.isoformat() if updated else None)
