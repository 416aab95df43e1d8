import os
import unittest
from unittest.mock import MagicMock, patch

from tour_pricing.core.quote_assistant import FALLBACK_TEXT, INVALID_REQUEST_TEXT, QuoteAssistant
from tour_pricing.models.assistant import AssistantRequest, AssistantRequestType
from tests.fakes import make_calculator, make_request


class QuoteAssistantTests(unittest.TestCase):
    def setUp(self):
        self.llm = MagicMock()
        self.llm.generate_text.return_value = "Konnichiwa! Leo here.\n\nLeo - Tour Assistant"
        self.assistant = QuoteAssistant(client=self.llm)

    def test_tour_intro_uses_llm(self):
        reply = self.assistant.respond(AssistantRequest(type=AssistantRequestType.TOUR_INTRO))

        self.assertTrue(reply.success)
        self.assertTrue(reply.used_llm)
        self.assertIn("Leo", reply.message)
        self.llm.generate_text.assert_called_once()

    def test_price_explanation_embeds_breakdown(self):
        result = make_calculator().calculate(make_request(vehicle_id=1))
        self.assistant.respond(AssistantRequest(type="price_explanation", calculation_data=result))

        prompt = self.llm.generate_text.call_args[0][0]
        self.assertIn("Tokyo Highlights", prompt)
        self.assertIn(f"Total: {result.costs.total_amount:.0f} JPY", prompt)

    def test_missing_inputs_are_rejected_without_llm(self):
        for req in (
            AssistantRequest(type="price_explanation"),
            AssistantRequest(type="tour_suggestion", message="   "),
            AssistantRequest(type="custom_question"),
        ):
            reply = self.assistant.respond(req)
            self.assertFalse(reply.success)
            self.assertEqual(reply.message, INVALID_REQUEST_TEXT)
        self.llm.generate_text.assert_not_called()

    def test_question_is_quoted_in_prompt(self):
        self.assistant.respond(AssistantRequest(type="custom_question", message="Is Nara good in June?"))
        self.assertIn("Is Nara good in June?", self.llm.generate_text.call_args[0][0])

    def test_llm_error_falls_back(self):
        self.llm.generate_text.side_effect = RuntimeError("Gemini API call failed: 503")

        with self.assertLogs("tour_pricing.core.quote_assistant", level="WARNING"):
            reply = self.assistant.respond(AssistantRequest(type="tour_suggestion", message="family, 5 days"))

        self.assertTrue(reply.success)
        self.assertFalse(reply.used_llm)
        self.assertEqual(reply.message, FALLBACK_TEXT[AssistantRequestType.TOUR_SUGGESTION])

    def test_blank_llm_answer_falls_back(self):
        self.llm.generate_text.return_value = "  "
        reply = self.assistant.respond(AssistantRequest(type="tour_intro"))
        self.assertEqual(reply.message, FALLBACK_TEXT[AssistantRequestType.TOUR_INTRO])

    @patch.dict(os.environ, {}, clear=False)
    def test_missing_api_key_falls_back(self):
        os.environ.pop("GEMINI_API_KEY", None)
        assistant = QuoteAssistant()

        with self.assertLogs("tour_pricing.core.quote_assistant", level="WARNING") as logs:
            reply = assistant.respond(AssistantRequest(type="tour_intro"))

        self.assertFalse(reply.used_llm)
        self.assertIn("GEMINI_API_KEY", logs.output[0])

    def test_every_type_has_fallback_text(self):
        for kind in AssistantRequestType:
            self.assertIn("Leo", FALLBACK_TEXT[kind])


if __name__ == "__main__":
    unittest.main()
