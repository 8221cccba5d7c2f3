"""Value objects for the auth domain."""

from uuid import UUID, uuid4

from pydantic import RootModel


class UserId(RootModel[UUID]):
    """Unique identifier for a user (trait owner)."""

    @classmethod
    def generate(cls) -> "UserId":
        return cls(uuid4())

    @classmethod
    def parse(cls, value: str) -> "UserId":
        """Parse a string id. Raises ValueError when it is not a UUID."""
        return cls(UUID(value))

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)
