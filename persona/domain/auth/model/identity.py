"""Identity hierarchy: base types for every request identity."""

from dataclasses import dataclass
from typing import Literal

AnonymousReason = Literal["missing_token", "invalid_token", "token_expired"]


@dataclass(frozen=True)
class Identity:
    """Base for all request identities."""


@dataclass(frozen=True)
class Anonymous(Identity):
    """Unauthenticated request.

    ``reason`` records why no principal could be resolved, so a gate can tell
    a caller that sent nothing apart from one whose token was rejected.
    """

    reason: AnonymousReason = "missing_token"
