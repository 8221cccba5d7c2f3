"""DI provider for the auth domain."""

import logging

import jwt
from dishka import Provider, Scope, from_context, provide
from starlette.requests import Request

from persona.config import Config
from persona.domain.auth.model.identity import Anonymous, Identity
from persona.domain.auth.model.principal import Principal
from persona.domain.auth.model.value import UserId
from persona.domain.auth.service.token import TokenService
from persona.domain.shared.error import AuthenticationError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def identity_from_header(auth_header: str | None, token_service: TokenService) -> Identity:
    """Resolve an Identity from an ``Authorization`` header value.

    Never raises: an absent or unusable token yields Anonymous with a reason.
    """
    if not auth_header or not auth_header.startswith(BEARER_PREFIX):
        return Anonymous(reason="missing_token")

    token = auth_header[len(BEARER_PREFIX) :].strip()
    if not token:
        return Anonymous(reason="missing_token")

    try:
        payload = token_service.validate_access_token(token)
        user_id = UserId.parse(payload["sub"])
    except jwt.ExpiredSignatureError:
        return Anonymous(reason="token_expired")
    except (jwt.InvalidTokenError, KeyError, ValueError):
        return Anonymous(reason="invalid_token")
    except jwt.PyJWTError:
        # Misconfigured key (e.g. empty secret): no token can be verified
        logger.error("Access token could not be verified; check auth.jwt configuration", exc_info=True)
        return Anonymous(reason="invalid_token")

    logger.debug("Identity resolved: user_id=%s", user_id)
    return Principal(user_id=user_id)


class AuthProvider(Provider):
    """DI provider for identity resolution."""

    request = from_context(provides=Request, scope=Scope.REQUEST)

    @provide(scope=Scope.APP)
    def get_token_service(self, config: Config) -> TokenService:
        return TokenService(_config=config.auth.jwt)

    @provide(scope=Scope.REQUEST)
    def get_identity(self, request: Request, token_service: TokenService) -> Identity:
        """Anonymous for unauthenticated requests, Principal otherwise."""
        return identity_from_header(request.headers.get("Authorization"), token_service)

    @provide(scope=Scope.REQUEST)
    def get_principal(self, identity: Identity) -> Principal:
        """Extract the Principal from the Identity. Raises if not authenticated."""
        if isinstance(identity, Principal):
            return identity
        reason = identity.reason if isinstance(identity, Anonymous) else "missing_token"
        if reason == "missing_token":
            raise AuthenticationError("Access token required", code="missing_token")
        raise AuthenticationError("Invalid or expired token", code=reason)
