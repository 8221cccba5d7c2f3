"""Principal: an authenticated identity, resolved per request."""

from dataclasses import dataclass

from persona.domain.auth.model.identity import Identity
from persona.domain.auth.model.value import UserId


@dataclass(frozen=True)
class Principal(Identity):
    """The authenticated identity of the current requester.

    Resolved per request from a verified access token. Immutable after creation.
    """

    user_id: UserId

    def owns(self, owner_id: UserId) -> bool:
        return self.user_id == owner_id
