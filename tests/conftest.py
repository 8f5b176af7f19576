# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator
from typing import Any
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from httpx import ASGITransport, AsyncClient

from itinerary_form.clients import SubmissionClient
from itinerary_form.managers import FormState
from itinerary_form.schemas import ItineraryResponse

FAKE_BASE_URL = "http://itinerary.test/api"

VALID_VALUES: dict[str, Any] = {
    "to": "Paris",
    "from": "London",
    "startDate": "2026-05-01",
    "endDate": "2026-05-04",
    "numberOfAdults": 2,
    "description": "Museums and food",
}

TRIP_PLAN: dict[str, Any] = {
    "summary": "Three days of art and pastries.",
    "attractions": [
        {
            "name": "Louvre",
            "description": "Home of the Mona Lisa.",
            "distanceFromCenter": 0.84,
            "address": "Rue de Rivoli, 75001 Paris",
        },
        {"name": "Sacre-Coeur", "description": "Basilica on Montmartre."},
    ],
    "flights": [
        {
            "airline": "Air France",
            "price": "EUR 120",
            "departureTime": "08:05",
            "arrivalTime": "10:20",
            "duration": "1h 15m",
            "stops": 0,
            "bookingClass": "Economy",
        },
    ],
}


def build_fake_service() -> FastAPI:
    """
    Create a stand-in for the remote itinerary service.

    By default it answers ``201`` echoing the request with a trip plan.
    Setting ``app.state.reply`` to ``(status, body)`` overrides the answer;
    a ``str`` body is sent as plain text.
    """
    app = FastAPI(title="Fake Itinerary Service")
    app.state.received = []
    app.state.reply = None

    @app.post("/api/itinerary")
    async def create_itinerary(request: Request) -> Response:
        payload = await request.json()
        app.state.received.append(payload)

        if app.state.reply is not None:
            status, body = app.state.reply
            if isinstance(body, str):
                return PlainTextResponse(body, status_code=status)
            return JSONResponse(body, status_code=status)

        return JSONResponse(
            {
                "id": str(uuid4()),
                **payload,
                "createdAt": "2026-04-01T10:00:00",
                "status": "CREATED",
                "message": "Itinerary created",
                "tripPlan": TRIP_PLAN,
            },
            status_code=201,
        )

    return app


@pytest.fixture
def trip_plan() -> dict[str, Any]:
    return dict(TRIP_PLAN)


@pytest.fixture
def valid_values() -> dict[str, Any]:
    return dict(VALID_VALUES)


@pytest.fixture
def fake_service() -> FastAPI:
    return build_fake_service()


@pytest.fixture
async def http_client(fake_service: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async client routed to the fake service."""
    async with AsyncClient(
        transport=ASGITransport(app=fake_service),
        base_url=FAKE_BASE_URL,
    ) as ac:
        yield ac


@pytest.fixture
def submission_client(http_client: AsyncClient) -> SubmissionClient:
    return SubmissionClient(base_url=FAKE_BASE_URL, http_client=http_client)


@pytest.fixture
def mock_client() -> AsyncMock:
    """Client double that succeeds with a minimal itinerary."""
    client = AsyncMock(spec=SubmissionClient)
    client.send.return_value = ItineraryResponse.model_validate(
        {"id": "abc", "to": "Paris", "from": "London"},
    )
    return client


@pytest.fixture
def form(mock_client: AsyncMock) -> FormState:
    return FormState(mock_client)


@pytest.fixture
def filled_form(form: FormState, valid_values: dict[str, Any]) -> FormState:
    for name, value in valid_values.items():
        form.update_field(name, value)
    return form
