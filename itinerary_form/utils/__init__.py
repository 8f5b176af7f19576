from itinerary_form.utils.helpers import parse_int, parse_iso_date, today_str

__all__ = [
    "parse_int",
    "parse_iso_date",
    "today_str",
]
