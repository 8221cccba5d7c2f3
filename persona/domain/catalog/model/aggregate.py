from datetime import UTC, datetime

from pydantic import Field

from persona.domain.auth.model.value import UserId
from persona.domain.catalog.model.category import TraitCategory
from persona.domain.catalog.model.rates import effective_daily_rate, effective_weekly_rate
from persona.domain.catalog.model.value import (
    DailyRate,
    Description,
    HourlyRate,
    MaxUsers,
    Name,
    TraitDraft,
    TraitId,
    TraitPatch,
    WeeklyRate,
)
from persona.domain.shared.model.aggregate import Aggregate


class Trait(Aggregate):
    """A rentable personality trait listed by its owner.

    ``success_rate``, ``total_rentals``, ``average_rating`` and ``verified`` are
    maintained by external rental and verification processes; the catalog reads
    them but never changes them.
    """

    id: TraitId
    owner_id: UserId
    name: Name
    description: Description
    category: TraitCategory
    hourly_rate: HourlyRate
    daily_rate: DailyRate | None = None
    weekly_rate: WeeklyRate | None = None
    available: bool = True
    max_users: MaxUsers = 1
    success_rate: float = Field(default=0.0, ge=0, le=100)
    total_rentals: int = Field(default=0, ge=0)
    average_rating: float = Field(default=0.0, ge=0, le=5)
    verified: bool = False
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(cls, owner_id: UserId, draft: TraitDraft, now: datetime | None = None) -> "Trait":
        now = now or datetime.now(UTC)
        return cls(
            id=TraitId.generate(),
            owner_id=owner_id,
            name=draft.name,
            description=draft.description,
            category=draft.category,
            hourly_rate=draft.hourly_rate,
            daily_rate=draft.daily_rate,
            weekly_rate=draft.weekly_rate,
            max_users=draft.max_users,
            created_at=now,
            updated_at=now,
        )

    def apply_patch(self, patch: TraitPatch, now: datetime | None = None) -> list[str]:
        """Apply the supplied fields and refresh ``updated_at``.

        Returns the names of the fields that were written.
        """
        changes = patch.changes()
        for field, value in changes.items():
            setattr(self, field, value)
        self.updated_at = now or datetime.now(UTC)
        return sorted(changes)

    @property
    def effective_daily_rate(self) -> int:
        return effective_daily_rate(self)

    @property
    def effective_weekly_rate(self) -> int:
        return effective_weekly_rate(self)
