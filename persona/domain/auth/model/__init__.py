"""Auth domain models."""

from .identity import Anonymous, Identity
from .owner import OwnerProfile
from .principal import Principal
from .value import UserId

__all__ = [
    "Anonymous",
    "Identity",
    "OwnerProfile",
    "Principal",
    "UserId",
]
