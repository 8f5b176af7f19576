# tests/errors/test_errors.py
"""Tests for itinerary_form/errors."""

from itinerary_form.configs.settings import ITINERARY_CREATION_ERROR
from itinerary_form.errors import (
    BaseAppError,
    InputError,
    SubmissionError,
    SubmissionInProgressError,
    TransportFailure,
    UnknownFieldError,
    ValidationFailure,
)


class TestBaseAppError:
    """Tests for BaseAppError exception."""

    def test_default_values(self) -> None:
        error = BaseAppError()
        assert error.detail == "Internal Error"
        assert error.status_code == 500

    def test_custom_values(self) -> None:
        error = BaseAppError(detail="Custom error", status_code=400)
        assert error.detail == "Custom error"
        assert error.status_code == 400

    def test_str_representation(self) -> None:
        assert str(BaseAppError(detail="Test error")) == "Test error"


class TestInputError:
    def test_carries_all_fields(self) -> None:
        error = InputError({"to": "Destination is required", "from": "Origin is required"})
        assert error.errors == {"to": "Destination is required", "from": "Origin is required"}
        assert error.status_code == 422
        assert str(error) == "Trip request has invalid fields: to, from"

    def test_errors_copied(self) -> None:
        errors = {"to": "Destination is required"}
        error = InputError(errors)
        errors.clear()
        assert error.errors == {"to": "Destination is required"}


class TestSubmissionErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(ValidationFailure, SubmissionError)
        assert issubclass(TransportFailure, SubmissionError)
        assert issubclass(SubmissionError, BaseAppError)

    def test_validation_failure(self) -> None:
        error = ValidationFailure({"to": "Unknown city"})
        assert error.field_errors == {"to": "Unknown city"}
        assert error.status_code == 400
        assert "Unknown city" in str(error)

    def test_transport_failure_default(self) -> None:
        error = TransportFailure()
        assert error.detail == ITINERARY_CREATION_ERROR
        assert error.status_code == 502

    def test_transport_failure_custom(self) -> None:
        error = TransportFailure("Itinerary service returned HTTP 500")
        assert str(error) == "Itinerary service returned HTTP 500"


class TestFormErrors:
    def test_unknown_field(self) -> None:
        error = UnknownFieldError("budget")
        assert error.name == "budget"
        assert error.detail == "Unknown form field: 'budget'"

    def test_submission_in_progress(self) -> None:
        error = SubmissionInProgressError()
        assert error.status_code == 409
        assert str(error) == "A submission is already in progress"
