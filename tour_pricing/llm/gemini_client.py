# Role: Gemini adapter for the quote assistant. Owns the API key, model and sampling settings and
# turns every SDK failure into RuntimeError, which the assistant treats as "use the fallback text".

import logging
import os
from typing import Optional

from google import genai
from google.genai import types

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash"


class GeminiClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: float = 0.4,
        max_output_tokens: int = 600,
    ) -> None:
        # Key line: constructing without a key fails fast; QuoteAssistant creates the client lazily.
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not self.api_key:
            raise RuntimeError("Missing GEMINI_API_KEY in environment or .env")

        self.model_name = model or os.getenv("GEMINI_MODEL", DEFAULT_MODEL)
        self.generation_config = types.GenerateContentConfig(
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )
        self.client = genai.Client(api_key=self.api_key)

    def generate_text(self, prompt: str) -> str:
        if not prompt or not prompt.strip():
            raise ValueError("Prompt must be non-empty.")

        logger.debug("Gemini request model=%s prompt_chars=%d", self.model_name, len(prompt))
        try:
            resp = self.client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=self.generation_config,
            )
        except Exception as e:
            raise RuntimeError(f"Gemini API call failed: {e}") from e

        text = (getattr(resp, "text", None) or "").strip()
        if not text:
            raise RuntimeError("Gemini returned an empty response.")
        return text
