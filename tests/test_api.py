"""
HTTP surface: routing, camelCase wire format and the error -> status mapping.
Shared singletons are swapped through dependency overrides so nothing touches the network.
"""
import unittest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from tour_pricing.api.deps import get_catalog, get_currency_converter, get_price_calculator, get_quote_assistant
from tour_pricing.core.catalog_store import CatalogStore
from tour_pricing.core.errors import ComputationError
from tour_pricing.core.pricing_engine import PriceCalculator
from tour_pricing.core.quote_assistant import FALLBACK_TEXT, QuoteAssistant
from tour_pricing.main import app
from tour_pricing.models.assistant import AssistantRequestType
from tests.fakes import offline_converter

BODY = {
    "tourId": 1,
    "vehicleId": 1,
    "startDate": "2025-07-01",
    "endDate": "2025-07-01",
    "participants": 2,
}


class ApiTestCase(unittest.TestCase):
    def setUp(self):
        self.catalog = CatalogStore.with_defaults()
        self.converter = offline_converter()
        self.llm = MagicMock()
        self.llm.generate_text.side_effect = RuntimeError("Missing GEMINI_API_KEY in environment or .env")

        calculator = PriceCalculator(self.catalog, converter=self.converter)
        app.dependency_overrides[get_catalog] = lambda: self.catalog
        app.dependency_overrides[get_currency_converter] = lambda: self.converter
        app.dependency_overrides[get_price_calculator] = lambda: calculator
        app.dependency_overrides[get_quote_assistant] = lambda: QuoteAssistant(client=self.llm)
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()


class CalculatorEndpointTests(ApiTestCase):
    def test_quote_in_jpy(self):
        resp = self.client.post("/api/calculator", json=BODY)

        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        costs = data["costs"]
        # 30000 base + 15000 vehicle + 5000 driver, +20% margin, +10% tax.
        self.assertAlmostEqual(costs["subtotal"], 50000)
        self.assertAlmostEqual(costs["profitAmount"], 10000)
        self.assertAlmostEqual(costs["taxAmount"], 6000)
        self.assertAlmostEqual(costs["totalAmount"], 66000)
        self.assertEqual(data["currency"], "JPY")
        self.assertEqual(data["tourDetails"]["durationDays"], 1)
        self.assertIsNone(data["calculationDetails"]["season"])

    def test_quote_in_usd(self):
        resp = self.client.post("/api/calculator", json=dict(BODY, currency="USD"))

        data = resp.json()
        self.assertEqual(data["currency"], "USD")
        self.assertAlmostEqual(data["totalInRequestedCurrency"], 66000 * 0.0067)
        self.assertAlmostEqual(data["costs"]["totalAmount"], 66000)

    def test_season_and_hotel_are_reported(self):
        body = dict(BODY, startDate="2025-04-01", endDate="2025-04-03", hotelStars=3, roomType="double")
        data = self.client.post("/api/calculator", json=body).json()

        self.assertEqual(data["calculationDetails"]["hotelPricing"], "stars:3")
        self.assertEqual(data["calculationDetails"]["season"]["multiplier"], 1.3)
        # Two calendar days is one night; two people share one double room.
        self.assertAlmostEqual(data["costs"]["hotelCost"], 7000)

    def test_validation_errors(self):
        resp = self.client.post("/api/calculator", json=dict(BODY, participants=0, endDate="2025-06-01"))

        self.assertEqual(resp.status_code, 400)
        fields = {e["field"] for e in resp.json()["errors"]}
        self.assertEqual(fields, {"participants", "endDate"})

    def test_missing_guide_id_is_reported_in_camel_case(self):
        resp = self.client.post("/api/calculator", json=dict(BODY, includeGuide=True))

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["errors"], [
            {"field": "guideId", "message": "guideId is required when includeGuide is true"},
        ])

    def test_non_object_body(self):
        resp = self.client.post("/api/calculator", json=[1, 2, 3])
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["errors"][0]["field"], "body")

    def test_unknown_entities(self):
        resp = self.client.post("/api/calculator", json=dict(BODY, tourId=99))
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Tour 99 not found", "entity": "tour", "id": 99})

        resp = self.client.post("/api/calculator", json=dict(BODY, includeGuide=True, guideId=42))
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["entity"], "guide")

    def test_computation_error_is_500(self):
        broken = MagicMock()
        broken.calculate.side_effect = ComputationError("subtotal is nan")
        app.dependency_overrides[get_price_calculator] = lambda: broken

        with self.assertLogs("tour_pricing.main", level="ERROR"):
            resp = self.client.post("/api/calculator", json=BODY)

        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"message": "Failed to calculate tour price"})


class CurrencyEndpointTests(ApiTestCase):
    def test_convert(self):
        resp = self.client.get("/api/currency/convert", params={"amount": "1000", "from": "JPY", "to": "krw"})

        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["from"], "JPY")
        self.assertEqual(data["to"], "KRW")
        self.assertAlmostEqual(data["convertedAmount"], 1000 * 9.12)

    def test_convert_rejects_bad_amount(self):
        for amount in ("abc", "nan"):
            resp = self.client.get("/api/currency/convert", params={"amount": amount, "from": "JPY", "to": "USD"})
            self.assertEqual(resp.status_code, 400)
            self.assertEqual(resp.json(), {"message": "Invalid amount"})

    def test_convert_rejects_unknown_currency(self):
        resp = self.client.get("/api/currency/convert", params={"amount": "1", "from": "JPY", "to": "EUR"})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("EUR", resp.json()["message"])

    def test_rates(self):
        data = self.client.get("/api/currency/rates").json()
        self.assertEqual(data["base"], "JPY")
        self.assertEqual(data["rates"]["JPY"], 1.0)
        self.assertIsNone(data["lastUpdated"])


class CatalogEndpointTests(ApiTestCase):
    def test_lists_use_camel_case(self):
        tours = self.client.get("/api/tours").json()
        self.assertEqual([t["id"] for t in tours], [1, 2])
        self.assertIn("basePrice", tours[0])

        vehicles = self.client.get("/api/vehicles").json()
        self.assertEqual(vehicles[0]["driverCostPerDay"], 5000)

        self.assertEqual(len(self.client.get("/api/hotels").json()), 2)
        self.assertEqual(len(self.client.get("/api/guides").json()), 2)
        self.assertEqual(len(self.client.get("/api/seasons").json()), 2)

    def test_single_tour(self):
        self.assertEqual(self.client.get("/api/tours/2").json()["name"], "Kyoto Cultural Tour")

        resp = self.client.get("/api/tours/99")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Tour not found"})

    def test_settings(self):
        self.assertEqual(self.client.get("/api/settings/tax_rate").json(), {"key": "tax_rate", "value": "10"})
        self.assertEqual(self.client.get("/api/settings/nope").status_code, 404)


class AssistantEndpointTests(ApiTestCase):
    def test_fallback_when_llm_unavailable(self):
        resp = self.client.post("/api/assistant", json={"type": "tour_intro"})

        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertTrue(data["success"])
        self.assertFalse(data["usedLlm"])
        self.assertEqual(data["message"], FALLBACK_TEXT[AssistantRequestType.TOUR_INTRO])

    def test_price_explanation_accepts_calculator_output(self):
        quote = self.client.post("/api/calculator", json=BODY).json()
        self.llm.generate_text.side_effect = None
        self.llm.generate_text.return_value = "Your quote is mostly the tour itself."

        resp = self.client.post("/api/assistant", json={"type": "price_explanation", "calculationData": quote})

        self.assertEqual(resp.json()["message"], "Your quote is mostly the tour itself.")
        self.assertTrue(resp.json()["usedLlm"])


class HealthTests(ApiTestCase):
    def test_health_and_root(self):
        self.assertEqual(self.client.get("/health").json(), {"status": "ok"})
        self.assertEqual(self.client.get("/").json()["docs"], "/docs")


if __name__ == "__main__":
    unittest.main()
