"""Trip itinerary form: validation, submission and rendering."""

from itinerary_form.clients import SubmissionClient
from itinerary_form.managers import FormState, Phase, SubmissionResult
from itinerary_form.services import render_errors, render_itinerary

__all__ = [
    "FormState",
    "Phase",
    "SubmissionClient",
    "SubmissionResult",
    "render_errors",
    "render_itinerary",
]
