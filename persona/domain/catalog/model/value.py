"""Value objects for the catalog domain: ids, field bounds and mutation payloads."""

from typing import Annotated, Any, Self
from uuid import UUID, uuid4

import pydantic
from pydantic import ConfigDict, Field, RootModel, StrictBool, StringConstraints, field_validator

from persona.domain.catalog.model.category import TraitCategory
from persona.domain.shared.error import FieldError, ValidationError
from persona.domain.shared.model.value import CamelModel


class TraitId(RootModel[UUID]):
    """Unique identifier for a Trait."""

    @classmethod
    def generate(cls) -> "TraitId":
        return cls(uuid4())

    @classmethod
    def parse(cls, value: str) -> "TraitId":
        """Parse a string id. Raises ValueError when it is not a UUID."""
        return cls(UUID(value))

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)


# Field bounds. Rates are integer cents. Numbers and flags are strict: JSON booleans
# are not integers and strings are not booleans.
NAME_MIN, NAME_MAX = 3, 200
DESCRIPTION_MIN, DESCRIPTION_MAX = 10, 2000
HOURLY_RATE_MIN, HOURLY_RATE_MAX = 100, 50_000
DAILY_RATE_MIN, DAILY_RATE_MAX = 500, 200_000
WEEKLY_RATE_MIN, WEEKLY_RATE_MAX = 2_000, 1_000_000
MAX_USERS_MIN, MAX_USERS_MAX = 1, 100

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=NAME_MIN, max_length=NAME_MAX)]
Description = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=DESCRIPTION_MIN, max_length=DESCRIPTION_MAX)
]
HourlyRate = Annotated[int, Field(ge=HOURLY_RATE_MIN, le=HOURLY_RATE_MAX, strict=True)]
DailyRate = Annotated[int, Field(ge=DAILY_RATE_MIN, le=DAILY_RATE_MAX, strict=True)]
WeeklyRate = Annotated[int, Field(ge=WEEKLY_RATE_MIN, le=WEEKLY_RATE_MAX, strict=True)]
MaxUsers = Annotated[int, Field(ge=MAX_USERS_MIN, le=MAX_USERS_MAX, strict=True)]

# One stable message per wire field, regardless of which constraint failed.
FIELD_MESSAGES: dict[str, str] = {
    "name": f"Name must be {NAME_MIN}-{NAME_MAX} characters",
    "description": f"Description must be {DESCRIPTION_MIN}-{DESCRIPTION_MAX} characters",
    "category": "Invalid category",
    "hourlyRate": "Hourly rate must be between $1.00 and $500.00",
    "dailyRate": "Daily rate must be between $5.00 and $2000.00",
    "weeklyRate": "Weekly rate must be between $20.00 and $10,000.00",
    "maxUsers": f"Max users must be between {MAX_USERS_MIN} and {MAX_USERS_MAX}",
    "available": "Available must be boolean",
}


class _Payload(CamelModel):
    """Base for trait mutation payloads.

    Unknown keys are dropped, which is how immutable (``id``, ``ownerId``,
    ``createdAt``) and externally managed (``verified``, ``averageRating``...)
    fields are ignored without error.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    @classmethod
    def parse(cls, data: Any) -> Self:
        """Validate a raw JSON object, reporting every offending field at once."""
        if not isinstance(data, dict):
            raise ValidationError(
                "Validation failed",
                errors=[FieldError(field="body", message="Request body must be a JSON object")],
            )
        try:
            return cls.model_validate(data)
        except pydantic.ValidationError as e:
            raise ValidationError("Validation failed", errors=_field_errors(e)) from None


def _field_errors(exc: pydantic.ValidationError) -> list[FieldError]:
    errors: list[FieldError] = []
    seen: set[str] = set()
    for err in exc.errors():
        field = ".".join(str(p) for p in err["loc"]) or "body"
        if field in seen:
            continue
        seen.add(field)
        value = None if err["type"] == "missing" else err.get("input")
        errors.append(FieldError(field=field, message=FIELD_MESSAGES.get(field, err["msg"]), value=value))
    return errors


class TraitDraft(_Payload):
    """Validated input for listing a new trait."""

    name: Name
    description: Description
    category: TraitCategory
    hourly_rate: HourlyRate
    daily_rate: DailyRate | None = None
    weekly_rate: WeeklyRate | None = None
    max_users: MaxUsers = 1


class TraitPatch(_Payload):
    """Partial update. Only fields present in the payload are applied.

    ``dailyRate``/``weeklyRate`` may be sent as ``null`` to go back to the
    derived rate; every other field rejects ``null``.
    """

    name: Name | None = None
    description: Description | None = None
    category: TraitCategory | None = None
    hourly_rate: HourlyRate | None = None
    daily_rate: DailyRate | None = None
    weekly_rate: WeeklyRate | None = None
    available: StrictBool | None = None
    max_users: MaxUsers | None = None

    @field_validator("name", "description", "category", "hourly_rate", "available", "max_users", mode="before")
    @classmethod
    def _not_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("may not be null")
        return v

    def changes(self) -> dict[str, Any]:
        """Field name to new value, for supplied fields only."""
        return {name: getattr(self, name) for name in self.model_fields_set}
