# itinerary_form/services/itinerary.py

"""Markdown rendering of a created itinerary and of form errors."""

from collections.abc import Mapping

from itinerary_form.schemas.itinerary import Attraction, Flight, ItineraryResponse, TripPlan


def confirmation(response: ItineraryResponse) -> str:
    """
    Trip-created message shown for every successful submission.

    Args:
        response: The created itinerary.

    Returns:
        A Markdown block with the route and the itinerary ID.
    """
    return (
        "## Trip Created!\n\n"
        f"Your itinerary from {response.origin} to {response.destination} "
        "has been created successfully.\n\n"
        f"ID: {response.id}"
    )


def stops_label(stops: int | None) -> str:
    """Return ``Non-stop`` for direct flights, else ``N stop(s)``."""
    return "Non-stop" if stops == 0 else f"{stops} stop(s)"


def attraction_lines(index: int, attraction: Attraction) -> list[str]:
    lines = [f"{index}. **{attraction.name}**"]
    if attraction.description:
        lines.append(f"   {attraction.description}")
    # A distance of 0 is not shown.
    if attraction.distance_from_center:
        lines.append(f"   📍 {attraction.distance_from_center:.1f} km from city center")
    if attraction.address:
        lines.append(f"   {attraction.address}")
    return lines


def flight_lines(flight: Flight) -> list[str]:
    return [
        f"- **{flight.airline}** {flight.price}",
        f"  🛫 {flight.departure_time} → 🛬 {flight.arrival_time}",
        f"  ⏱ {flight.duration} • {stops_label(flight.stops)} • {flight.booking_class}",
    ]


def trip_plan_sections(plan: TripPlan) -> list[str]:
    """
    Render the Summary, Top Attractions and Flight Options sections.

    Sections with no content are left out.
    """
    sections: list[str] = []

    if plan.summary:
        sections.append(f"### Summary\n\n{plan.summary}")

    if plan.attractions:
        lines = ["### Top Attractions", ""]
        for index, attraction in enumerate(plan.attractions, start=1):
            lines.extend(attraction_lines(index, attraction))
        sections.append("\n".join(lines))

    if plan.flights:
        lines = ["### Flight Options", ""]
        for flight in plan.flights:
            lines.extend(flight_lines(flight))
        sections.append("\n".join(lines))

    return sections


def render_itinerary(response: ItineraryResponse) -> str:
    """
    Render a successful submission.

    Args:
        response: The created itinerary.

    Returns:
        Markdown text: the confirmation, followed by the trip plan sections
        when the service returned a plan.
    """
    parts = [confirmation(response)]
    if response.trip_plan is not None:
        parts.extend(trip_plan_sections(response.trip_plan))
    return "\n\n".join(parts)


def render_errors(errors: Mapping[str, str]) -> str:
    """Render field errors as a Markdown list, one ``- field: message`` per line."""
    return "\n".join(f"- {name}: {message}" for name, message in errors.items())
