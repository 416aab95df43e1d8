# Role: Prompt builders for the quote assistant. One builder per request type; the price explanation
# embeds the computed breakdown so the model explains real numbers instead of inventing them.

from __future__ import annotations

from tour_pricing.models.calculation import CalculationResult

_PERSONA = """
You are Leo, the virtual travel assistant of a Japan tour operator.
Answer in plain, friendly, professional language, like an experienced local guide.
Never invent prices: only use numbers given below.
End with the line: "Leo - Tour Assistant"
""".strip()


def build_tour_intro_prompt() -> str:
    return f"""
{_PERSONA}

Give a VERY SHORT introduction to Japan as a travel destination:
1. At most 150 words in total.
2. Three famous destinations, one line each.
3. Two dishes not to miss.
4. The two best times of year to visit.
5. One local cultural tip few visitors know.
""".strip()


def build_tour_suggestion_prompt(message: str) -> str:
    return f"""
{_PERSONA}

The customer describes their trip like this:
"{message}"

Rules:
1. Suggest 2 concrete tours, 2-3 lines each (name, length, highlight).
2. Add the 2-3 most important practical notes.
3. Prefer local experiences over crowded landmarks.
4. At most 200 words.
""".strip()


def build_custom_question_prompt(message: str) -> str:
    return f"""
{_PERSONA}

Customer question:
"{message}"

Answer briefly (at most 150 words). If the question is not about travel in Japan or the quote,
politely steer back to tours.
""".strip()


def build_price_explanation_prompt(result: CalculationResult) -> str:
    tour = result.tour_details
    details = result.calculation_details
    costs = result.costs
    season = details.season

    # Step 1: flatten the breakdown into a readable block (JPY unless stated).
    season_line = f"{season.name} (multiplier {season.multiplier})" if season else "Regular season (multiplier 1.0)"
    breakdown = "\n".join(
        [
            f"Tour: {tour.name}, {tour.location}",
            f"Dates: {details.start_date} to {details.end_date} ({tour.duration_days} days)",
            f"Participants: {details.participants}",
            f"Season: {season_line}",
            f"Base cost: {costs.base_cost:.0f} JPY",
            f"Vehicle: {costs.vehicle_cost:.0f} JPY",
            f"Driver: {costs.driver_cost:.0f} JPY",
            f"Hotel: {costs.hotel_cost:.0f} JPY",
            f"Meals: {costs.meals_cost:.0f} JPY",
            f"Guide: {costs.guide_cost:.0f} JPY",
            f"Subtotal: {costs.subtotal:.0f} JPY",
            f"Service fee: {costs.profit_amount:.0f} JPY",
            f"Tax: {costs.tax_amount:.0f} JPY",
            f"Total: {costs.total_amount:.0f} JPY"
            f" ({result.total_in_requested_currency:.2f} {result.currency.value})",
        ]
    )

    return f"""
{_PERSONA}

Quote breakdown:
{breakdown}

Rules:
1. Explain the price structure BRIEFLY (max 150 words); focus on the largest cost items.
2. Give at most 2 money-saving tips, one line each.
3. No more than 10 lines in total.
""".strip()
