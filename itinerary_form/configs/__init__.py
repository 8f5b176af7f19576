from itinerary_form.configs.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
