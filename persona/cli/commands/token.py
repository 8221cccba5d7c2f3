"""Mint development access tokens."""

import sys
from uuid import UUID

import cyclopts

from persona.cli.console import get_console
from persona.config import Config
from persona.domain.auth.model.value import UserId
from persona.domain.auth.service.token import TokenService

app = cyclopts.App(name="token", help="Access token utilities")


@app.default
def issue(user_id: UUID, expire_minutes: int | None = None) -> None:
    """Print a signed access token for USER_ID.

    Args:
        user_id: Owner id to put in the token subject.
        expire_minutes: Override the configured token lifetime.
    """
    console = get_console()
    jwt_config = Config().auth.jwt
    if not jwt_config.secret:
        console.error("No JWT secret configured", hint="Set PERSONA_AUTH__JWT__SECRET")
        sys.exit(1)
    if expire_minutes is not None:
        jwt_config = jwt_config.model_copy(update={"access_token_expire_minutes": expire_minutes})

    token = TokenService(_config=jwt_config).create_access_token(UserId(user_id))
    console.print(token, soft_wrap=True)
