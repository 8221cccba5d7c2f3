from datetime import datetime

from persona.domain.auth.model.owner import OwnerProfile
from persona.domain.auth.model.value import UserId
from persona.domain.catalog.model.aggregate import Trait
from persona.domain.catalog.model.category import TraitCategory
from persona.domain.catalog.model.value import TraitId
from persona.domain.shared.model.value import CamelModel


class TraitView(CamelModel):
    """Public representation of a trait.

    Carries the stored optional rates and the effective rates as distinct
    fields, plus the owner's public profile (``None`` when the owner is gone).
    """

    id: TraitId
    owner_id: UserId
    name: str
    description: str
    category: TraitCategory
    hourly_rate: int
    daily_rate: int | None
    weekly_rate: int | None
    effective_daily_rate: int
    effective_weekly_rate: int
    available: bool
    max_users: int
    success_rate: float
    total_rentals: int
    average_rating: float
    verified: bool
    created_at: datetime
    updated_at: datetime
    owner: OwnerProfile | None = None

    @classmethod
    def of(cls, trait: Trait, owner: OwnerProfile | None) -> "TraitView":
        return cls(
            **trait.model_dump(),
            effective_daily_rate=trait.effective_daily_rate,
            effective_weekly_rate=trait.effective_weekly_rate,
            owner=owner,
        )
