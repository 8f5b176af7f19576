# tests/services/test_itinerary_render.py
"""Tests for itinerary rendering."""

from typing import Any

from itinerary_form.schemas import ItineraryResponse
from itinerary_form.services import render_errors, render_itinerary
from itinerary_form.services.itinerary import stops_label


def itinerary(**extra: Any) -> ItineraryResponse:
    return ItineraryResponse.model_validate({"id": "abc", "to": "Paris", "from": "London", **extra})


class TestRenderItinerary:
    """Tests for render_itinerary."""

    def test_confirmation_only(self) -> None:
        assert render_itinerary(itinerary()) == (
            "## Trip Created!\n\n"
            "Your itinerary from London to Paris has been created successfully.\n\n"
            "ID: abc"
        )

    def test_full_plan(self, trip_plan: dict[str, Any]) -> None:
        rendered = render_itinerary(itinerary(tripPlan=trip_plan))

        assert "### Summary\n\nThree days of art and pastries." in rendered
        assert "### Top Attractions" in rendered
        assert "1. **Louvre**" in rendered
        assert "2. **Sacre-Coeur**" in rendered
        assert "📍 0.8 km from city center" in rendered
        assert "Rue de Rivoli, 75001 Paris" in rendered
        assert "### Flight Options" in rendered
        assert "- **Air France** EUR 120" in rendered
        assert "🛫 08:05 → 🛬 10:20" in rendered
        assert "⏱ 1h 15m • Non-stop • Economy" in rendered

    def test_sections_in_order(self, trip_plan: dict[str, Any]) -> None:
        rendered = render_itinerary(itinerary(tripPlan=trip_plan))
        assert (
            rendered.index("Trip Created!")
            < rendered.index("### Summary")
            < rendered.index("### Top Attractions")
            < rendered.index("### Flight Options")
        )

    def test_empty_plan_has_no_sections(self) -> None:
        plan = {"summary": "", "attractions": [], "flights": []}
        rendered = render_itinerary(itinerary(tripPlan=plan))
        assert "###" not in rendered

    def test_attraction_without_distance(self) -> None:
        plan = {"attractions": [{"name": "Sacre-Coeur", "description": "Basilica"}]}
        rendered = render_itinerary(itinerary(tripPlan=plan))
        assert "km from city center" not in rendered
        assert "   Basilica" in rendered


class TestStopsLabel:
    def test_non_stop(self) -> None:
        assert stops_label(0) == "Non-stop"

    def test_with_stops(self) -> None:
        assert stops_label(2) == "2 stop(s)"


class TestRenderErrors:
    def test_one_line_per_field(self) -> None:
        assert render_errors({"to": "Unknown city", "endDate": "End date is required"}) == (
            "- to: Unknown city\n- endDate: End date is required"
        )

    def test_empty(self) -> None:
        assert render_errors({}) == ""
