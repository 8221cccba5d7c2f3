"""Authorization actions: every operation subject to access control."""

from enum import StrEnum


class Action(StrEnum):
    """Structured enum of all authorization-relevant operations."""

    TRAIT_READ = "trait:read"
    TRAIT_CREATE = "trait:create"
    TRAIT_UPDATE = "trait:update"
    TRAIT_DELETE = "trait:delete"

    CATEGORY_READ = "category:read"

    @property
    def verb(self) -> str:
        """The bare operation name, e.g. ``update`` for ``trait:update``."""
        return self.value.split(":", 1)[1]

    @property
    def resource(self) -> str:
        """The resource type, e.g. ``trait`` for ``trait:update``."""
        return self.value.split(":", 1)[0]
