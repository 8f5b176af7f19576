# itinerary_form/managers/form_state.py
"""
Trip request form state and submission lifecycle.

FormState is the single source of truth for the draft trip request, its
validation errors and the submission phase. It is an explicit container
owned by the UI layer; nothing here is module-level state.

Lifecycle:
    - IDLE: Editing. Errors, if any, belong to the last submit attempt.
    - PENDING: A request is in flight; re-submission is rejected.
    - SUCCESS: The service created an itinerary.
    - FAILED: Transport failure, shown as a single banner message.

Field edits clear that field's error immediately; the full rule set only
runs when submit is attempted.
"""

from asyncio import CancelledError
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any
from uuid import uuid4

from itinerary_form.clients.protocols import ItineraryClientProtocol
from itinerary_form.configs.settings import (
    DEFAULT_ADULTS,
    DESCRIPTION_TOO_LONG,
    DESTINATION_REQUIRED,
    END_BEFORE_START,
    END_DATE_INVALID,
    END_DATE_REQUIRED,
    ITINERARY_CREATION_ERROR,
    MAX_ADULTS,
    MAX_ADULTS_MESSAGE,
    MAX_DESCRIPTION_LENGTH,
    MIN_ADULTS,
    MIN_ADULTS_MESSAGE,
    ORIGIN_REQUIRED,
    START_DATE_INVALID,
    START_DATE_REQUIRED,
)
from itinerary_form.errors import (
    InputError,
    SubmissionInProgressError,
    TransportFailure,
    UnknownFieldError,
    ValidationFailure,
)
from itinerary_form.monitoring import get_logger
from itinerary_form.schemas.itinerary import ItineraryRequest, ItineraryResponse
from itinerary_form.utils.helpers import parse_int, parse_iso_date

logger = get_logger(__name__)

ValidationErrors = dict[str, str]

ADULTS_FIELD = "numberOfAdults"
DATE_FIELDS = frozenset({"startDate", "endDate"})
FORM_FIELDS = ("to", "from", "startDate", "endDate", ADULTS_FIELD, "description")

FIELD_ALIASES: dict[str, str] = {
    "destination": "to",
    "origin": "from",
    "start_date": "startDate",
    "end_date": "endDate",
    "adultCount": ADULTS_FIELD,
    "adult_count": ADULTS_FIELD,
    "number_of_adults": ADULTS_FIELD,
}


class Phase(Enum):
    """Submission lifecycle phases."""

    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class ErrorInfo:
    """User-facing failure message plus the original error for diagnostics."""

    message: str
    cause: BaseException | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class SubmissionResult:
    """Tagged result of a submit attempt: Idle, Pending, Success or Failed."""

    phase: Phase = Phase.IDLE
    itinerary: ItineraryResponse | None = None
    error: ErrorInfo | None = None

    @classmethod
    def idle(cls) -> "SubmissionResult":
        return cls()

    @classmethod
    def pending(cls) -> "SubmissionResult":
        return cls(phase=Phase.PENDING)

    @classmethod
    def success(cls, itinerary: ItineraryResponse) -> "SubmissionResult":
        return cls(phase=Phase.SUCCESS, itinerary=itinerary)

    @classmethod
    def failed(cls, error: ErrorInfo) -> "SubmissionResult":
        return cls(phase=Phase.FAILED, error=error)


@dataclass(frozen=True)
class FieldRule:
    """A single validation rule: the field it reports on and when it fires."""

    field: str
    message: str
    violated: Callable[[Mapping[str, Any]], bool]


def _blank(value: object) -> bool:
    return not str(value or "").strip()


def _bad_date(value: object) -> bool:
    return not _blank(value) and parse_iso_date(str(value)) is None


def _end_before_start(values: Mapping[str, Any]) -> bool:
    start = parse_iso_date(str(values["startDate"] or ""))
    end = parse_iso_date(str(values["endDate"] or ""))
    return start is not None and end is not None and end < start


# Evaluated in order; a later rule on the same field overwrites an earlier one.
VALIDATION_RULES: tuple[FieldRule, ...] = (
    FieldRule("to", DESTINATION_REQUIRED, lambda v: _blank(v["to"])),
    FieldRule("from", ORIGIN_REQUIRED, lambda v: _blank(v["from"])),
    FieldRule("startDate", START_DATE_REQUIRED, lambda v: _blank(v["startDate"])),
    FieldRule("startDate", START_DATE_INVALID, lambda v: _bad_date(v["startDate"])),
    FieldRule("endDate", END_DATE_REQUIRED, lambda v: _blank(v["endDate"])),
    FieldRule("endDate", END_DATE_INVALID, lambda v: _bad_date(v["endDate"])),
    FieldRule(
        ADULTS_FIELD,
        MIN_ADULTS_MESSAGE,
        lambda v: v[ADULTS_FIELD] is None or v[ADULTS_FIELD] < MIN_ADULTS,
    ),
    FieldRule(
        ADULTS_FIELD,
        MAX_ADULTS_MESSAGE,
        lambda v: v[ADULTS_FIELD] is not None and v[ADULTS_FIELD] > MAX_ADULTS,
    ),
    FieldRule(
        "description",
        DESCRIPTION_TOO_LONG,
        lambda v: len(v["description"] or "") > MAX_DESCRIPTION_LENGTH,
    ),
    FieldRule("endDate", END_BEFORE_START, _end_before_start),
)


def canonical_field(name: str) -> str:
    """
    Resolve a field name or alias to the form field name.

    Raises:
        UnknownFieldError: If the name is not a form field or alias.
    """
    resolved = FIELD_ALIASES.get(name, name)
    if resolved not in FORM_FIELDS:
        raise UnknownFieldError(name)
    return resolved


def empty_draft() -> dict[str, Any]:
    """Return the values of a freshly opened form."""
    return {
        "to": "",
        "from": "",
        "startDate": "",
        "endDate": "",
        ADULTS_FIELD: DEFAULT_ADULTS,
        "description": "",
    }


class FormState:
    """
    Draft trip request, its errors and the submission phase.

    Attributes:
        form_id: Identifier of this form session, attached to log lines.
    """

    def __init__(self, client: ItineraryClientProtocol) -> None:
        """
        Initialize an empty form.

        Args:
            client: Itinerary service client used by ``submit``.
        """
        self._client = client
        self.form_id = uuid4().hex
        self._logger = logger.bind(form_id=self.form_id)
        self._values: dict[str, Any] = empty_draft()
        self._errors: ValidationErrors = {}
        self._result = SubmissionResult.idle()

    # --- Read-only views ---

    @property
    def values(self) -> dict[str, Any]:
        """Get a copy of the current field values."""
        return dict(self._values)

    @property
    def errors(self) -> ValidationErrors:
        """Get a copy of the current field errors."""
        return dict(self._errors)

    @property
    def result(self) -> SubmissionResult:
        """Get the last submission result."""
        return self._result

    @property
    def phase(self) -> Phase:
        """Get the current submission phase."""
        return self._result.phase

    @property
    def is_pending(self) -> bool:
        return self._result.phase is Phase.PENDING

    @property
    def can_submit(self) -> bool:
        """Whether the submit affordance is enabled."""
        return not self.is_pending

    @property
    def banner(self) -> str | None:
        """Get the transport failure message, if the last attempt failed."""
        error = self._result.error
        return error.message if error else None

    @property
    def can_increment(self) -> bool:
        current = self._values[ADULTS_FIELD]
        return current is not None and MIN_ADULTS <= current + 1 <= MAX_ADULTS

    @property
    def can_decrement(self) -> bool:
        current = self._values[ADULTS_FIELD]
        return current is not None and MIN_ADULTS <= current - 1 <= MAX_ADULTS

    @property
    def character_count(self) -> int:
        return len(self._values["description"])

    @property
    def character_counter(self) -> str:
        """Get the description counter, e.g. ``"42/300"``."""
        return f"{self.character_count}/{MAX_DESCRIPTION_LENGTH}"

    # --- Mutation ---

    def update_field(self, name: str, raw_value: object) -> None:
        """
        Store user input for a field and clear that field's error.

        The adult count is parsed like a number input; unparseable or empty
        input is stored as None. Dates accept ``date`` objects or ISO text.
        Everything else is stored as text.

        Args:
            name: Form field name or alias.
            raw_value: Value as typed by the user.

        Raises:
            UnknownFieldError: If the field does not exist.
        """
        key = canonical_field(name)

        if key == ADULTS_FIELD:
            value: Any = parse_int(raw_value)
        elif key in DATE_FIELDS and isinstance(raw_value, date):
            value = raw_value.isoformat()
        else:
            value = "" if raw_value is None else str(raw_value)

        self._values[key] = value
        self._errors.pop(key, None)

    def increment_adults(self) -> None:
        """Add one adult, unless that would leave the allowed range."""
        if self.can_increment:
            self.update_field(ADULTS_FIELD, self._values[ADULTS_FIELD] + 1)

    def decrement_adults(self) -> None:
        """Remove one adult, unless that would leave the allowed range."""
        if self.can_decrement:
            self.update_field(ADULTS_FIELD, self._values[ADULTS_FIELD] - 1)

    def reset(self) -> None:
        """
        Start a fresh session with an empty draft.

        Raises:
            SubmissionInProgressError: If a submission is pending.
        """
        if self.is_pending:
            raise SubmissionInProgressError
        self._values = empty_draft()
        self._errors = {}
        self._result = SubmissionResult.idle()

    # --- Validation ---

    def validate(self) -> ValidationErrors:
        """
        Check every rule against the current values.

        Pure: does not touch the stored errors. All failing fields are
        reported together.

        Returns:
            Field name -> message; empty when the request is submittable.
        """
        errors: ValidationErrors = {}
        for rule in VALIDATION_RULES:
            if rule.violated(self._values):
                errors[rule.field] = rule.message
        return errors

    def require_submittable(self) -> ItineraryRequest:
        """
        Freeze the draft into a request.

        Returns:
            The immutable request snapshot.

        Raises:
            InputError: With every failing field when the draft is invalid.
        """
        errors = self.validate()
        if errors:
            raise InputError(errors)

        values = self._values
        return ItineraryRequest.model_validate(
            {
                "to": values["to"],
                "from": values["from"],
                "startDate": values["startDate"].strip(),
                "endDate": values["endDate"].strip(),
                "numberOfAdults": values[ADULTS_FIELD],
                "description": values["description"],
            },
        )

    # --- Submission ---

    async def submit(self) -> SubmissionResult:
        """
        Validate and, when valid, send the request to the itinerary service.

        Returns:
            The resulting state: Idle with errors when blocked locally or
            rejected remotely, Success, or Failed.

        Raises:
            SubmissionInProgressError: If a submission is already pending.
        """
        if self.is_pending:
            raise SubmissionInProgressError

        self._errors = {}
        self._result = SubmissionResult.idle()

        try:
            request = self.require_submittable()
        except InputError as e:
            self._errors = e.errors
            self._logger.info("Submission blocked by input errors", fields=sorted(e.errors))
            return self._result

        self._result = SubmissionResult.pending()
        self._logger.info("Submission pending")

        try:
            itinerary = await self._client.send(request)
        except ValidationFailure as e:
            self._errors = dict(e.field_errors)
            self._result = SubmissionResult.idle()
            self._logger.info("Submission rejected by service", fields=sorted(e.field_errors))
        except TransportFailure as e:
            self._result = SubmissionResult.failed(ErrorInfo(ITINERARY_CREATION_ERROR, cause=e))
            self._logger.warning("Submission failed", error=str(e))
        except CancelledError:
            self._result = SubmissionResult.idle()
            self._logger.info("Submission cancelled")
            raise
        except Exception as e:
            self._result = SubmissionResult.failed(ErrorInfo(ITINERARY_CREATION_ERROR, cause=e))
            self._logger.exception("Unexpected submission error")
            raise
        else:
            self._result = SubmissionResult.success(itinerary)
            self._logger.info("Submission succeeded", itinerary_id=itinerary.id)

        return self._result
