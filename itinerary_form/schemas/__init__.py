# itinerary_form/schemas/__init__.py

from itinerary_form.schemas.itinerary import (
    Attraction,
    Flight,
    ItineraryRequest,
    ItineraryResponse,
    TripPlan,
)

__all__ = [
    "Attraction",
    "Flight",
    "ItineraryRequest",
    "ItineraryResponse",
    "TripPlan",
]
