from itinerary_form.errors.base import BaseAppError
from itinerary_form.errors.form import InputError, SubmissionInProgressError, UnknownFieldError
from itinerary_form.errors.submission import SubmissionError, TransportFailure, ValidationFailure

__all__ = [
    "BaseAppError",
    "InputError",
    "SubmissionError",
    "SubmissionInProgressError",
    "TransportFailure",
    "UnknownFieldError",
    "ValidationFailure",
]
