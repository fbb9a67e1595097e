"""Error types raised by outlay.

Store failures are not wrapped: ``sqlite3.Error`` propagates unchanged so the
caller decides whether a retry makes sense.
"""


class OutlayError(Exception):
    """Base class for outlay errors."""


class ValidationError(OutlayError, ValueError):
    """Caller-facing input error tied to a single field."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class NotFoundError(OutlayError, LookupError):
    """A lookup by identifier found no record."""

    def __init__(self, entity: str, identifier: object) -> None:
        super().__init__(f"{entity} {identifier} not found")
        self.entity = entity
        self.identifier = identifier


class CategoryInUseError(OutlayError):
    """A category cannot be removed while expenses still reference it."""

    def __init__(self, name: str, count: int) -> None:
        super().__init__(f"Category '{name}' is used by {count} expense(s)")
        self.name = name
        self.count = count


class ConfigError(OutlayError):
    """The configuration file holds a value of the wrong type."""
