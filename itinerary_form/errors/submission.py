"""Errors produced by the itinerary service client."""

from httpx import codes

from itinerary_form.configs.settings import ITINERARY_CREATION_ERROR
from itinerary_form.errors.base import BaseAppError


class SubmissionError(BaseAppError):
    """Base exception for itinerary submission failures."""

    def __init__(
        self,
        detail: str = ITINERARY_CREATION_ERROR,
        status_code: int = codes.BAD_GATEWAY,
    ) -> None:
        super().__init__(detail=detail, status_code=status_code)


class ValidationFailure(SubmissionError):
    """
    The service rejected the payload with field-level errors.

    The field errors replace the form's error mapping verbatim.
    """

    def __init__(
        self,
        field_errors: dict[str, str],
        status_code: int = codes.BAD_REQUEST,
    ) -> None:
        super().__init__(detail="Itinerary service rejected the request", status_code=status_code)
        self.field_errors = dict(field_errors)

    def __str__(self) -> str:
        return f"{self.detail}: {self.field_errors}"


class TransportFailure(SubmissionError):
    """
    Any other failure: network, protocol, unexpected status or malformed body.

    The original exception is chained as ``__cause__`` for diagnostics.
    """

    def __init__(
        self,
        detail: str = ITINERARY_CREATION_ERROR,
        status_code: int = codes.BAD_GATEWAY,
    ) -> None:
        super().__init__(detail=detail, status_code=status_code)
