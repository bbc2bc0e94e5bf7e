"""
Exceptions raised by the SolarSmart engine.
"""


class SolarSmartError(Exception):
    """Base class for all engine errors."""


class LocationNotFoundError(SolarSmartError, LookupError):
    """The city id does not match any known location."""

    def __init__(self, city_id: int):
        self.city_id = city_id
        super().__init__(f"Unknown city id: {city_id}")


class InputValidationError(SolarSmartError, ValueError):
    """A numeric input or configuration value is out of range."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class DegenerateResultError(SolarSmartError, ArithmeticError):
    """The recommended system has no output, so ROI is undefined."""


class LeadNotFoundError(SolarSmartError, LookupError):
    def __init__(self, lead_id: str):
        self.lead_id = lead_id
        super().__init__(f"Unknown lead id: {lead_id}")
