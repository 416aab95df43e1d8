# Role: Thin LLM layer on top of the calculator. Builds a prompt per request type and asks Gemini;
# when there is no key, the call fails, or the answer is empty, it answers with fixed fallback text.
# It never raises to the caller for LLM problems.

from __future__ import annotations

import logging
from typing import Optional

from tour_pricing.llm.gemini_client import GeminiClient
from tour_pricing.models.assistant import AssistantReply, AssistantRequest, AssistantRequestType
from tour_pricing.prompts.assistant_prompt import (
    build_custom_question_prompt,
    build_price_explanation_prompt,
    build_tour_intro_prompt,
    build_tour_suggestion_prompt,
)

logger = logging.getLogger(__name__)

_SIGNATURE = "Leo - Tour Assistant"

FALLBACK_TEXT = {
    AssistantRequestType.TOUR_INTRO: (
        "Hello! I'm Leo, your Japan tour assistant.\n\n"
        "Japan blends tradition and modern life: the old temples of Kyoto, majestic Mount Fuji "
        "and the energy of Tokyo.\n\n"
        "Don't miss sushi, ramen, tempura or a kaiseki dinner. The best seasons to visit are spring "
        "(cherry blossoms, March-April) and autumn (red leaves, October-November).\n\n"
        "A local tip: drop into an izakaya after work hours to see everyday Japanese life.\n\n"
        f"{_SIGNATURE}"
    ),
    AssistantRequestType.PRICE_EXPLANATION: (
        "Hello! I'm Leo, your Japan tour assistant.\n\n"
        "Your quote already includes the tour itself, a private vehicle with a professional driver, "
        "the accommodation you selected, the meals on the itinerary and your guide, plus our service "
        "fee and tax. Peak seasons carry a seasonal surcharge.\n\n"
        "Ways to save:\n"
        "1. Choose a lower hotel tier or larger shared rooms.\n"
        "2. Tighten the itinerary to reduce vehicle and guide days.\n\n"
        f"{_SIGNATURE}"
    ),
    AssistantRequestType.TOUR_SUGGESTION: (
        "Hello! I'm Leo, your Japan tour assistant.\n\n"
        "Two tours that fit most trips:\n"
        "1. Tokyo & surroundings (5 days): Tokyo, Mount Fuji, Hakone. Best in spring or autumn.\n"
        "2. Kyoto & Osaka heritage (6 days): old temples in Kyoto, food and shopping in Osaka.\n\n"
        "Notes:\n"
        "- Book 2-3 months ahead, especially in peak season.\n"
        "- Pack for the season; weather varies a lot across the year.\n\n"
        f"{_SIGNATURE}"
    ),
    AssistantRequestType.CUSTOM_QUESTION: (
        "Hello! I'm Leo, your Japan tour assistant.\n\n"
        "Thanks for reaching out. For a precise answer to your question, please contact our "
        "consultants directly; we usually reply within one working day.\n\n"
        f"{_SIGNATURE}"
    ),
}

INVALID_REQUEST_TEXT = "Invalid request type or missing information."


class QuoteAssistant:
    def __init__(self, client: Optional[GeminiClient] = None) -> None:
        # Key line: lazy-init avoids crashing if GEMINI_API_KEY is missing (fallback text still works).
        self._client = client

    def _get_client(self) -> GeminiClient:
        if self._client is None:
            self._client = GeminiClient()
        return self._client

    def build_prompt(self, request: AssistantRequest) -> Optional[str]:
        message = (request.message or "").strip()
        if request.type == AssistantRequestType.TOUR_INTRO:
            return build_tour_intro_prompt()
        if request.type == AssistantRequestType.PRICE_EXPLANATION:
            if request.calculation_data is None:
                return None
            return build_price_explanation_prompt(request.calculation_data)
        if request.type == AssistantRequestType.TOUR_SUGGESTION:
            return build_tour_suggestion_prompt(message) if message else None
        if request.type == AssistantRequestType.CUSTOM_QUESTION:
            return build_custom_question_prompt(message) if message else None
        return None

    def respond(self, request: AssistantRequest) -> AssistantReply:
        # 1) Build the prompt; missing inputs for the type -> unsuccessful reply
        # 2) Ask the LLM
        # 3) Any LLM failure (no key, API error, empty text) -> fallback text for the type
        prompt = self.build_prompt(request)
        if prompt is None:
            return AssistantReply(success=False, message=INVALID_REQUEST_TEXT)

        try:
            text = (self._get_client().generate_text(prompt) or "").strip()
        except (RuntimeError, ValueError) as e:
            logger.warning("Quote assistant falling back for %s: %s", request.type.value, e)
            text = ""

        if not text:
            return AssistantReply(success=True, message=FALLBACK_TEXT[request.type], used_llm=False)

        return AssistantReply(success=True, message=text, used_llm=True)
