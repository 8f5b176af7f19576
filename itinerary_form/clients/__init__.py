# itinerary_form/clients/__init__.py

from itinerary_form.clients.itinerary_client import SubmissionClient
from itinerary_form.clients.protocols import ItineraryClientProtocol

__all__ = [
    "ItineraryClientProtocol",
    "SubmissionClient",
]
