class CityDistanceError(Exception):
    """Base class for every error raised by the distance workflow."""


class ValidationError(CityDistanceError, ValueError):
    """A value object was created from invalid input."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class NotFoundError(CityDistanceError, LookupError):
    """A requested city has no entry in the location directory."""

    def __init__(self, city: str, missing: tuple[str, ...] | None = None):
        self.city = city
        self.missing = missing or (city,)
        super().__init__(f"City not found in directory: {city}")


class PipelineError(CityDistanceError, RuntimeError):
    """A workflow stage has no outgoing transition."""
