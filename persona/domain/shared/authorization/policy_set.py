"""PolicySet: declarative authorization rules and the Relationship enum.

This is the single source of truth for "who can do what on which trait".
There is no role hierarchy, delegation or admin override: ownership is exact
equality between the principal's user id and the resource's ``owner_id``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeVar

from persona.domain.auth.model.identity import Identity
from persona.domain.auth.model.principal import Principal
from persona.domain.shared.authorization.action import Action
from persona.domain.shared.error import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Relationship(StrEnum):
    """Relationships between a principal and a resource."""

    OWNER = "owner"


@dataclass(frozen=True)
class PolicyRule:
    """A single authorization rule in the policy set."""

    action: Action
    authenticated: bool = False
    relationship: Relationship | None = None


def allow(
    action: Action,
    *,
    authenticated: bool = False,
    relationship: Relationship | None = None,
) -> PolicyRule:
    """Convenience constructor for a policy rule.

    A relationship rule implies authentication.
    """
    return PolicyRule(
        action=action,
        authenticated=authenticated or relationship is not None,
        relationship=relationship,
    )


class PolicySet:
    """Declarative set of all authorization rules.

    Evaluation order for an action:
    1. Relationship rules need a resource: a missing one is NotFound, so
       callers cannot probe for existence through a different error code.
    2. Rules are tried in order; the first match allows.
    3. No match denies: 401 for anonymous callers, 403 otherwise.
    """

    def __init__(self, rules: list[PolicyRule]) -> None:
        self._rules = rules
        self._by_action: dict[Action, list[PolicyRule]] = {}
        for rule in rules:
            self._by_action.setdefault(rule.action, []).append(rule)

    def guard(self, identity: Identity | None, action: Action, resource: T | None = None) -> T | None:
        """Return the resource if access is allowed, raise otherwise."""
        principal_id = str(identity.user_id) if isinstance(identity, Principal) else "anonymous"
        rules = self._by_action.get(action, [])
        if not rules:
            raise ConfigurationError(f"No policy rule for action: {action}")

        if resource is None and any(r.relationship is not None for r in rules):
            logger.info("Authorization skipped, resource missing: principal=%s action=%s", principal_id, action)
            raise NotFoundError(f"{action.resource.capitalize()} not found", code="not_found")

        for rule in rules:
            if self._matches(rule, identity, resource):
                logger.info("Authorization allowed: principal=%s action=%s", principal_id, action)
                return resource

        logger.warning("Authorization denied: principal=%s action=%s", principal_id, action)
        if not isinstance(identity, Principal):
            raise AuthenticationError("Access token required", code="missing_token")
        raise AuthorizationError(
            f"Access denied - you can only {action.verb} your own {action.resource}s",
            code="access_denied",
        )

    def _matches(self, rule: PolicyRule, identity: Identity | None, resource: Any) -> bool:
        if not rule.authenticated:
            return True
        if not isinstance(identity, Principal):
            return False
        if rule.relationship == Relationship.OWNER:
            owner_id = getattr(resource, "owner_id", None)
            return owner_id is not None and identity.owns(owner_id)
        return True

    def validate_coverage(self) -> None:
        """Startup check: every Action enum member must have at least one rule."""
        covered = {r.action for r in self._rules}
        missing = set(Action) - covered
        if missing:
            raise ConfigurationError(f"Actions without policy rules: {sorted(missing)}")


POLICY_SET = PolicySet(
    [
        # Public reads
        allow(Action.TRAIT_READ),
        allow(Action.CATEGORY_READ),
        # Any authenticated identity may list a trait; it becomes the owner
        allow(Action.TRAIT_CREATE, authenticated=True),
        # Mutations are owner-only
        allow(Action.TRAIT_UPDATE, relationship=Relationship.OWNER),
        allow(Action.TRAIT_DELETE, relationship=Relationship.OWNER),
    ]
)


def authorize(identity: Identity | None, trait: T | None, action: Action) -> T:
    """Ownership guard for trait mutations.

    Raises NotFoundError when the trait does not exist (checked first),
    AuthorizationError when the identity does not own it.
    """
    if action not in (Action.TRAIT_UPDATE, Action.TRAIT_DELETE):
        raise ConfigurationError(f"authorize() only guards mutations, got {action}")
    result = POLICY_SET.guard(identity, action, trait)
    assert result is not None
    return result
