from typing import Any

from persona.domain.auth.model.owner import OwnerProfile
from persona.domain.auth.model.value import UserId


def row_to_owner(row: dict[str, Any]) -> OwnerProfile:
    return OwnerProfile(
        id=UserId.parse(row["id"]),
        username=row["username"],
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        avatar=row.get("avatar"),
        bio=row.get("bio"),
        verified=bool(row.get("verified", False)),
    )
