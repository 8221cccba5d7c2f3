from abc import abstractmethod
from typing import Protocol

from persona.domain.auth.model.owner import OwnerProfile
from persona.domain.auth.model.value import UserId
from persona.domain.shared.port import Port


class OwnerReader(Port, Protocol):
    """Read-only lookup of public owner profiles.

    Ids with no matching user are simply absent from the result.
    """

    @abstractmethod
    async def get_many(self, ids: list[UserId]) -> dict[UserId, OwnerProfile]: ...
