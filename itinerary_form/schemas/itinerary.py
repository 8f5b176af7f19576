# itinerary_form/schemas/itinerary.py

"""
Schemas for the remote itinerary service request and response.

The request is the frozen snapshot of a submittable form. The response and
its trip plan are a pass-through contract: shapes are parsed, nothing about
the content is validated locally.
"""

from datetime import date, datetime
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from itinerary_form.configs.settings import (
    END_BEFORE_START,
    MAX_ADULTS,
    MAX_DESCRIPTION_LENGTH,
    MIN_ADULTS,
)


class ItineraryRequest(BaseModel):
    """
    Frozen trip request sent to ``POST /itinerary``.

    Example:
        >>> request = ItineraryRequest(
        ...     to="Paris",
        ...     origin="London",
        ...     start_date=date(2026, 5, 1),
        ...     end_date=date(2026, 5, 4),
        ... )
        >>> request.to_payload()["from"]
        'London'
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    destination: str = Field(..., alias="to", min_length=1, description="Destination city")
    origin: str = Field(..., alias="from", min_length=1, description="Departure city")
    start_date: date = Field(..., description="First day of the trip")
    end_date: date = Field(..., description="Last day of the trip")
    number_of_adults: int = Field(
        MIN_ADULTS,
        ge=MIN_ADULTS,
        le=MAX_ADULTS,
        description="Number of adult travellers",
    )
    description: str = Field(
        "",
        max_length=MAX_DESCRIPTION_LENGTH,
        description="Free text about the trip",
    )

    @model_validator(mode="after")
    def validate_date_order(self) -> Self:
        """Reject trips that end before they start."""
        if self.end_date < self.start_date:
            raise ValueError(END_BEFORE_START)
        return self

    def to_payload(self) -> dict[str, object]:
        """Return the JSON body with the service's field names."""
        return self.model_dump(mode="json", by_alias=True)


# --- Response Models ---


class _ServiceModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class Attraction(_ServiceModel):
    """A recommended place to visit."""

    name: str | None = None
    description: str | None = None
    distance_from_center: float | None = Field(None, description="Kilometres from the city center")
    address: str | None = None


class Flight(_ServiceModel):
    """A flight option between origin and destination."""

    airline: str | None = None
    price: str | None = None
    departure_time: str | None = None
    arrival_time: str | None = None
    duration: str | None = None
    stops: int | None = None
    booking_class: str | None = None


class TripPlan(_ServiceModel):
    """Generated itinerary: summary, ordered attractions and flight options."""

    summary: str | None = None
    attractions: list[Attraction] = Field(default_factory=list)
    flights: list[Flight] = Field(default_factory=list)

    @field_validator("attractions", "flights", mode="before")
    @classmethod
    def null_as_empty(cls, v: object) -> object:
        """Treat an explicit null list as an empty one."""
        return [] if v is None else v


class ItineraryResponse(_ServiceModel):
    """Response of ``POST /itinerary``."""

    id: str
    destination: str = Field(..., alias="to")
    origin: str = Field(..., alias="from")
    start_date: date | None = None
    end_date: date | None = None
    number_of_adults: int | None = None
    description: str | None = None
    created_at: datetime | None = None
    status: str | None = None
    message: str | None = None
    trip_plan: TripPlan | None = None
