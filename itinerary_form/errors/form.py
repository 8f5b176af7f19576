"""Errors raised by the form before anything reaches the network."""

from httpx import codes

from itinerary_form.errors.base import BaseAppError


class InputError(BaseAppError):
    """
    Raised when the draft has local validation errors.

    Carries every offending field at once so they can be surfaced together.
    """

    def __init__(
        self,
        errors: dict[str, str],
        detail: str = "Trip request has invalid fields",
    ) -> None:
        super().__init__(detail=detail, status_code=codes.UNPROCESSABLE_ENTITY)
        self.errors = dict(errors)

    def __str__(self) -> str:
        fields = ", ".join(self.errors)
        return f"{self.detail}: {fields}" if fields else self.detail


class UnknownFieldError(BaseAppError):
    """Raised when updating a field the form does not have."""

    def __init__(self, name: str) -> None:
        super().__init__(detail=f"Unknown form field: {name!r}", status_code=codes.BAD_REQUEST)
        self.name = name


class SubmissionInProgressError(BaseAppError):
    """Raised when submit is triggered while a submission is pending."""

    def __init__(self, detail: str = "A submission is already in progress") -> None:
        super().__init__(detail=detail, status_code=codes.CONFLICT)
