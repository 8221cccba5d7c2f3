from persona.domain.auth.model.value import UserId
from persona.domain.shared.model.value import CamelModel


class OwnerProfile(CamelModel):
    """Public subset of a user record, joined onto trait views.

    Never carries email or credentials.
    """

    id: UserId
    username: str
    first_name: str | None = None
    last_name: str | None = None
    avatar: str | None = None
    bio: str | None = None
    verified: bool = False
