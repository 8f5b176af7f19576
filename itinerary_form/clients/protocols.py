"""Protocol definitions for itinerary service clients."""

from typing import Protocol, runtime_checkable

from itinerary_form.schemas.itinerary import ItineraryRequest, ItineraryResponse


@runtime_checkable
class ItineraryClientProtocol(Protocol):
    """
    Interface the form uses to reach the itinerary service.

    ``send`` makes a single attempt and raises ``ValidationFailure`` or
    ``TransportFailure`` on failure.
    """

    async def send(self, request: ItineraryRequest) -> ItineraryResponse:
        """Submit the trip request and return the created itinerary."""
        ...
