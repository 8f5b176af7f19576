# itinerary_form/clients/itinerary_client.py

from typing import Any

from httpx import AsyncClient, HTTPError, InvalidURL, Response, StreamError, codes
from pydantic import ValidationError

from itinerary_form.configs.settings import ITINERARY_PATH, settings
from itinerary_form.errors import TransportFailure, ValidationFailure
from itinerary_form.monitoring import get_logger
from itinerary_form.schemas.itinerary import ItineraryRequest, ItineraryResponse

logger = get_logger(__name__)

# Transport-level exceptions that are converted to TransportFailure
NETWORK_EXCEPTIONS = (
    HTTPError,
    InvalidURL,
    StreamError,
    OSError,
)


def field_errors_from(response: Response) -> dict[str, str] | None:
    """
    Extract a field error body from an error response.

    A field error body is a non-empty JSON object mapping field names to
    messages. Anything else yields None.

    Args:
        response: The HTTP response from the itinerary service.

    Returns:
        The field errors, or None if the body is not a field error body.
    """
    try:
        body: Any = response.json()
    except ValueError:
        return None

    if not isinstance(body, dict) or not body:
        return None
    if not all(isinstance(k, str) and isinstance(v, str) for k, v in body.items()):
        return None
    return body


class SubmissionClient:
    """
    Async client for the remote itinerary service.

    Holds configuration only; every ``send`` is a single independent attempt
    with no retries and no timeout.

    Attributes:
        base_url: Service base URL, ``/itinerary`` is appended.
    """

    def __init__(
        self,
        base_url: str | None = None,
        http_client: AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Overrides ``settings.ITINERARY_API_URL``.
            http_client: Shared httpx client. When omitted a short-lived
                client is opened for each call.
        """
        self._base_url = (base_url or settings.ITINERARY_API_URL).rstrip("/")
        self._http_client = http_client

    @property
    def base_url(self) -> str:
        """Get the service base URL."""
        return self._base_url

    @property
    def endpoint(self) -> str:
        """Get the itinerary creation URL."""
        return f"{self._base_url}{ITINERARY_PATH}"

    async def send(self, request: ItineraryRequest) -> ItineraryResponse:
        """
        Submit a trip request to the itinerary service.

        Args:
            request: Frozen, locally valid trip request.

        Returns:
            The created itinerary, with its trip plan when the service made one.

        Raises:
            ValidationFailure: The service rejected fields of the request.
            TransportFailure: Network error, unexpected status or malformed body.
        """
        logger.info(
            "Submitting itinerary request",
            destination=request.destination,
            origin=request.origin,
            start_date=str(request.start_date),
            end_date=str(request.end_date),
        )

        try:
            response = await self._post(request.to_payload())
        except NETWORK_EXCEPTIONS as e:
            logger.warning("Itinerary service unreachable", error=str(e))
            msg = f"Itinerary service unreachable: {e}"
            raise TransportFailure(msg, status_code=codes.SERVICE_UNAVAILABLE) from e

        return self._handle_response(response)

    async def _post(self, payload: dict[str, object]) -> Response:
        if self._http_client is not None:
            return await self._http_client.post(self.endpoint, json=payload)

        async with AsyncClient(timeout=None) as client:
            return await client.post(self.endpoint, json=payload)

    def _handle_response(self, response: Response) -> ItineraryResponse:
        status = response.status_code

        if response.is_success:
            try:
                itinerary = ItineraryResponse.model_validate(response.json())
            except (ValueError, ValidationError) as e:
                logger.warning("Malformed itinerary response", status_code=status, error=str(e))
                msg = "Malformed response from itinerary service"
                raise TransportFailure(msg) from e

            logger.info(
                "Itinerary created",
                itinerary_id=itinerary.id,
                has_trip_plan=itinerary.trip_plan is not None,
            )
            return itinerary

        field_errors = field_errors_from(response)
        if response.is_client_error and field_errors:
            logger.info(
                "Itinerary request rejected",
                status_code=status,
                fields=sorted(field_errors),
            )
            raise ValidationFailure(field_errors, status_code=status)

        logger.warning("Itinerary service error", status_code=status, body=response.text[:200])
        msg = f"Itinerary service returned HTTP {status}"
        raise TransportFailure(msg)
