"""Token service for JWT access token creation and validation."""

import logging
import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from persona.config import JwtConfig
from persona.domain.auth.model.value import UserId
from persona.domain.shared.service import Service

logger = logging.getLogger(__name__)

AUDIENCE = "authenticated"


class TokenService(Service):
    """Issues and verifies HS256 access tokens.

    Tokens are issued by an external account service in production; ``create_access_token``
    exists for the ``persona token`` CLI command and for tests.
    """

    _config: JwtConfig

    def create_access_token(
        self,
        user_id: UserId,
        additional_claims: dict[str, Any] | None = None,
    ) -> str:
        """Create a signed access token whose subject is the user id."""
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._config.access_token_expire_minutes)

        payload = {
            "sub": str(user_id),
            "aud": AUDIENCE,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": secrets.token_hex(16),
        }
        if additional_claims:
            payload.update(additional_claims)

        return jwt.encode(payload, self._config.secret, algorithm=self._config.algorithm)

    def validate_access_token(self, token: str) -> dict[str, Any]:
        """Validate and decode an access token.

        Raises:
            jwt.ExpiredSignatureError: If the token has expired
            jwt.InvalidTokenError: If the token is malformed or the signature is wrong
        """
        return jwt.decode(
            token,
            self._config.secret,
            algorithms=[self._config.algorithm],
            audience=AUDIENCE,
            options={"require": ["sub", "exp"]},
        )

    @property
    def access_token_expire_seconds(self) -> int:
        return self._config.access_token_expire_minutes * 60
