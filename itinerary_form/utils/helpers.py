from datetime import date, datetime
from math import isfinite
from re import compile as re_compile

LEADING_INT = re_compile(r"^\s*([+-]?\d+)")
ISO_DATE = re_compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def today_str() -> str:
    """Return the current local time as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(
        "%Y-%m-%d %H:%M:%S",
    )


def parse_int(value: object) -> int | None:
    """
    Parse a number input the way a browser does.

    Takes the leading integer of the text ("3 adults" -> 3, "2.5" -> 2).
    Empty or non-numeric input yields None.

    Args:
        value: Raw input value.

    Returns:
        The parsed integer, or None.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if isfinite(value) else None
    match = LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def parse_iso_date(value: str) -> date | None:
    """Return the date for an ISO ``YYYY-MM-DD`` string, or None."""
    text = value.strip()
    if not ISO_DATE.fullmatch(text):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None
