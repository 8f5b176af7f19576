from itinerary_form.managers.form_state import (
    FIELD_ALIASES,
    FORM_FIELDS,
    VALIDATION_RULES,
    ErrorInfo,
    FieldRule,
    FormState,
    Phase,
    SubmissionResult,
    ValidationErrors,
)

__all__ = [
    "FIELD_ALIASES",
    "FORM_FIELDS",
    "VALIDATION_RULES",
    "ErrorInfo",
    "FieldRule",
    "FormState",
    "Phase",
    "SubmissionResult",
    "ValidationErrors",
]
