"""Error hierarchy for the catalog.

Error layers:
- PersonaError: Base class for all catalog errors
- DomainError: Business rule violations, validation failures (4xx responses)
- InfrastructureError: Storage and configuration failures (500 responses)

These errors are mapped to HTTP responses by the global exception handler in app.py.
"""

from dataclasses import dataclass


class PersonaError(Exception):
    """Base class for all catalog errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (business logic violations - typically 4xx)
# =============================================================================


class DomainError(PersonaError):
    """Base class for domain/business errors."""


@dataclass(frozen=True)
class FieldError:
    """A single offending input field."""

    field: str
    message: str
    value: object = None


class ValidationError(DomainError):
    """Input validation failed.

    Carries every offending field, not just the first one found.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        errors: list[FieldError] | None = None,
    ) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.errors = list(errors or [])

    @property
    def fields(self) -> list[str]:
        return [e.field for e in self.errors]


class UnknownCategory(ValidationError):
    """A category value outside the closed taxonomy."""

    def __init__(self, value: str, field: str = "category") -> None:
        super().__init__(
            f"Unknown category: {value}",
            errors=[FieldError(field=field, message="Invalid category", value=value)],
        )
        self.value = value


class NotFoundError(DomainError):
    """Resource not found."""


class AuthenticationError(DomainError):
    """No identity, or the presented identity could not be verified."""


class AuthorizationError(DomainError):
    """Authenticated, but not allowed to perform this operation."""


# =============================================================================
# Infrastructure Errors (system-level failures)
# =============================================================================


class InfrastructureError(PersonaError):
    """Base class for infrastructure/system errors."""


class StorageUnavailableError(InfrastructureError):
    """Storage backend (database) failed or is unavailable."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
