from itinerary_form.services.itinerary import render_errors, render_itinerary

__all__ = [
    "render_errors",
    "render_itinerary",
]
