"""Tests for PolicySet: declarative ownership rules."""

import logging

import pytest

from persona.domain.auth.model.identity import Anonymous
from persona.domain.auth.model.principal import Principal
from persona.domain.auth.model.value import UserId
from persona.domain.shared.authorization.action import Action
from persona.domain.shared.authorization.policy_set import (
    POLICY_SET,
    PolicySet,
    Relationship,
    allow,
    authorize,
)
from persona.domain.shared.error import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    NotFoundError,
)


class _FakeResource:
    """Fake resource with owner_id for testing ownership checks."""

    def __init__(self, owner_id: UserId) -> None:
        self.owner_id = owner_id


def _principal(user_id: UserId | None = None) -> Principal:
    return Principal(user_id=user_id or UserId.generate())


class TestAllow:
    def test_relationship_implies_authenticated(self):
        rule = allow(Action.TRAIT_UPDATE, relationship=Relationship.OWNER)
        assert rule.authenticated is True

    def test_public_by_default(self):
        assert allow(Action.TRAIT_READ).authenticated is False


class TestPolicySetOwnership:
    def test_owner_can_update(self):
        principal = _principal()
        resource = _FakeResource(owner_id=principal.user_id)

        assert POLICY_SET.guard(principal, Action.TRAIT_UPDATE, resource) is resource

    def test_non_owner_denied_update(self):
        resource = _FakeResource(owner_id=UserId.generate())

        with pytest.raises(AuthorizationError) as exc_info:
            POLICY_SET.guard(_principal(), Action.TRAIT_UPDATE, resource)
        assert exc_info.value.message == "Access denied - you can only update your own traits"

    def test_non_owner_denied_delete_message(self):
        resource = _FakeResource(owner_id=UserId.generate())

        with pytest.raises(AuthorizationError) as exc_info:
            POLICY_SET.guard(_principal(), Action.TRAIT_DELETE, resource)
        assert exc_info.value.message == "Access denied - you can only delete your own traits"

    def test_anonymous_denied_with_authentication_error(self):
        resource = _FakeResource(owner_id=UserId.generate())

        with pytest.raises(AuthenticationError):
            POLICY_SET.guard(Anonymous(), Action.TRAIT_DELETE, resource)

    def test_missing_resource_is_not_found_before_ownership(self):
        with pytest.raises(NotFoundError) as exc_info:
            POLICY_SET.guard(_principal(), Action.TRAIT_UPDATE, None)
        assert exc_info.value.message == "Trait not found"


class TestPolicySetPublicRules:
    def test_anonymous_can_read(self):
        POLICY_SET.guard(Anonymous(), Action.TRAIT_READ)

    def test_anonymous_can_read_categories(self):
        POLICY_SET.guard(None, Action.CATEGORY_READ)

    def test_anonymous_cannot_create(self):
        with pytest.raises(AuthenticationError):
            POLICY_SET.guard(Anonymous(), Action.TRAIT_CREATE)

    def test_principal_can_create(self):
        POLICY_SET.guard(_principal(), Action.TRAIT_CREATE)


class TestPolicySetCoverage:
    def test_default_policy_covers_every_action(self):
        POLICY_SET.validate_coverage()

    def test_missing_action_detected(self):
        partial = PolicySet([allow(Action.TRAIT_READ)])
        with pytest.raises(ConfigurationError, match="Actions without policy rules"):
            partial.validate_coverage()

    def test_guard_without_rule_is_misconfiguration(self):
        with pytest.raises(ConfigurationError):
            PolicySet([]).guard(_principal(), Action.TRAIT_READ)


class TestAuthorize:
    def test_returns_owned_trait(self):
        principal = _principal()
        resource = _FakeResource(owner_id=principal.user_id)
        assert authorize(principal, resource, Action.TRAIT_DELETE) is resource

    def test_only_guards_mutations(self):
        with pytest.raises(ConfigurationError):
            authorize(_principal(), _FakeResource(UserId.generate()), Action.TRAIT_READ)


class TestAuthorizationAudit:
    def test_denial_logged_at_warning(self, caplog):
        resource = _FakeResource(owner_id=UserId.generate())
        with caplog.at_level(logging.INFO, logger="persona.domain.shared.authorization.policy_set"):
            with pytest.raises(AuthorizationError):
                POLICY_SET.guard(_principal(), Action.TRAIT_UPDATE, resource)

        assert any(r.levelno == logging.WARNING and "denied" in r.message for r in caplog.records)

    def test_allow_logged_at_info(self, caplog):
        principal = _principal()
        with caplog.at_level(logging.INFO, logger="persona.domain.shared.authorization.policy_set"):
            POLICY_SET.guard(principal, Action.TRAIT_UPDATE, _FakeResource(principal.user_id))

        assert any(r.levelno == logging.INFO and "allowed" in r.message for r in caplog.records)
