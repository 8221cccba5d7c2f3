from datetime import UTC, datetime
from typing import Any

from persona.domain.auth.model.value import UserId
from persona.domain.catalog.model.aggregate import Trait
from persona.domain.catalog.model.category import TraitCategory
from persona.domain.catalog.model.value import TraitId


def _aware(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored in UTC.
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def row_to_trait(row: dict[str, Any]) -> Trait:
    return Trait(
        id=TraitId.parse(row["id"]),
        owner_id=UserId.parse(row["owner_id"]),
        name=row["name"],
        description=row["description"],
        category=TraitCategory(row["category"]),
        hourly_rate=row["hourly_rate"],
        daily_rate=row["daily_rate"],
        weekly_rate=row["weekly_rate"],
        available=row["available"],
        max_users=row["max_users"],
        success_rate=row["success_rate"],
        total_rentals=row["total_rentals"],
        average_rating=row["average_rating"],
        verified=row["verified"],
        created_at=_aware(row["created_at"]),
        updated_at=_aware(row["updated_at"]),
    )


def trait_to_dict(trait: Trait) -> dict[str, Any]:
    """Convert a Trait to a row dict. Effective rates are never stored."""
    return {
        "id": str(trait.id),
        "owner_id": str(trait.owner_id),
        "name": trait.name,
        "description": trait.description,
        "category": trait.category.value,
        "hourly_rate": trait.hourly_rate,
        "daily_rate": trait.daily_rate,
        "weekly_rate": trait.weekly_rate,
        "available": trait.available,
        "max_users": trait.max_users,
        "success_rate": trait.success_rate,
        "total_rentals": trait.total_rentals,
        "average_rating": trait.average_rating,
        "verified": trait.verified,
        "created_at": trait.created_at,
        "updated_at": trait.updated_at,
    }


# Columns a catalog write may touch. Counters, ratings and verification belong
# to external processes and are left as stored.
MUTABLE_COLUMNS = (
    "name",
    "description",
    "category",
    "hourly_rate",
    "daily_rate",
    "weekly_rate",
    "available",
    "max_users",
    "updated_at",
)
