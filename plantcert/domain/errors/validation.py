"""Input validation errors."""

from __future__ import annotations

from plantcert.domain.exceptions import CertificationRegistryError


class InvalidInputError(CertificationRegistryError):
    """Raised when a required field is empty, zero or malformed.

    Attributes:
        field: Name of the offending field.
        reason: Why the value was rejected.
    """

    def __init__(self, field: str, reason: str = "must not be empty") -> None:
        """Initialize the error.

        Args:
            field: Name of the offending field.
            reason: Why the value was rejected.
        """
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid input: {field} {reason}")


def require_text(field: str, value: str) -> str:
    """Return value unchanged, or raise InvalidInputError if blank."""
    if not value or not value.strip():
        raise InvalidInputError(field)
    return value
