# Role: Request/response schema for the quote assistant endpoint.

from __future__ import annotations

from enum import Enum
from typing import Optional

from tour_pricing.models.base import CamelModel
from tour_pricing.models.calculation import CalculationResult


class AssistantRequestType(str, Enum):
    TOUR_INTRO = "tour_intro"
    PRICE_EXPLANATION = "price_explanation"
    TOUR_SUGGESTION = "tour_suggestion"
    CUSTOM_QUESTION = "custom_question"


class AssistantRequest(CamelModel):
    type: AssistantRequestType
    message: Optional[str] = None
    calculation_data: Optional[CalculationResult] = None


class AssistantReply(CamelModel):
    success: bool
    message: str
    used_llm: bool = False
