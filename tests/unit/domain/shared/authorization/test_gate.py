"""Tests for handler-level gates and startup validation."""

import asyncio

import pytest

from persona.domain.auth.model.principal import Principal
from persona.domain.auth.model.value import UserId
from persona.domain.shared.authorization.gate import (
    Authenticated,
    Public,
    authenticated,
    public,
)
from persona.domain.shared.authorization.startup import validate_all_handlers
from persona.domain.shared.error import AuthenticationError, ConfigurationError
from persona.domain.shared.query import Query, QueryHandler, Result


class Ping(Query):
    pass


class Pong(Result):
    ok: bool = True


class PublicPingHandler(QueryHandler[Ping, Pong]):
    __auth__ = public()

    async def run(self, cmd: Ping) -> Pong:
        return Pong()


class PrivatePingHandler(QueryHandler[Ping, Pong]):
    __auth__ = authenticated()
    principal: Principal

    async def run(self, cmd: Ping) -> Pong:
        return Pong()


class TestGateFactories:
    def test_public(self):
        assert isinstance(public(), Public)

    def test_authenticated(self):
        assert isinstance(authenticated(), Authenticated)


class TestGatedRun:
    async def test_public_handler_runs(self):
        assert (await PublicPingHandler().run(Ping())).ok

    async def test_authenticated_handler_runs_with_principal(self):
        handler = PrivatePingHandler(principal=Principal(user_id=UserId.generate()))
        assert (await handler.run(Ping())).ok

    async def test_authenticated_handler_rejects_missing_principal(self):
        handler = PrivatePingHandler(principal=None)  # type: ignore[arg-type]
        with pytest.raises(AuthenticationError):
            await handler.run(Ping())

    def test_handlers_are_dataclasses(self):
        assert "principal" in PrivatePingHandler.__dataclass_fields__


class TestStartupValidation:
    def test_all_defined_handlers_pass(self):
        validate_all_handlers()

    def test_handler_without_gate_fails(self):
        class UngatedHandler(QueryHandler[Ping, Pong]):
            async def run(self, cmd: Ping) -> Pong:
                return Pong()

        try:
            with pytest.raises(ConfigurationError, match="UngatedHandler"):
                validate_all_handlers()

            with pytest.raises(ConfigurationError, match="no __auth__"):
                asyncio.run(UngatedHandler().run(Ping()))
        finally:
            # Hide the class from later scans
            UngatedHandler.__auth__ = public()
