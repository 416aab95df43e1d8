# Role: Thin HTTP adapter for the quote assistant. Schema validation only; prompt building,
# the LLM call and fallback text all live in QuoteAssistant.

from fastapi import APIRouter, Depends

from tour_pricing.api.deps import get_quote_assistant
from tour_pricing.core.quote_assistant import QuoteAssistant
from tour_pricing.models.assistant import AssistantReply, AssistantRequest

router = APIRouter(prefix="/api", tags=["assistant"])


@router.post("/assistant", response_model=AssistantReply)
def ask(req: AssistantRequest, assistant: QuoteAssistant = Depends(get_quote_assistant)) -> AssistantReply:
    return assistant.respond(req)
