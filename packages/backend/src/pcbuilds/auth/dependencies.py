"""FastAPI auth dependencies.

Learn: These are used as Depends() in route handlers to extract
and validate the current user identity from the request.

require_auth is the gateway: it reads the access_token cookie,
verifies it, and hands the route a typed AuthContext. It never
refreshes tokens. When the access token expires the client must call
POST /auth/refresh-token itself.
"""

from dataclasses import dataclass

import structlog
from fastapi import Depends, Request

from pcbuilds.auth.jwt import TokenError, TokenIssuer
from pcbuilds.config import Settings
from pcbuilds.errors import AccessDenied

logger = structlog.get_logger()


@dataclass(frozen=True)
class AuthContext:
    """The authenticated identity making the request (from the access token)."""

    id: str
    username: str


def get_app_settings(request: Request) -> Settings:
    """The Settings instance the running app was built with."""
    return request.app.state.settings


def get_token_issuer(settings: Settings = Depends(get_app_settings)) -> TokenIssuer:
    return TokenIssuer(settings)


async def require_auth(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthContext:
    """Validate the access cookie (403 when missing or invalid)."""
    token = request.cookies.get(settings.access_cookie_name)
    if not token:
        raise AccessDenied("You need to sign in before continuing")

    try:
        payload = issuer.verify_access_token(token)
    except TokenError as e:
        logger.info("auth.access_token_rejected", reason=str(e))
        raise AccessDenied("Invalid token", error=str(e)) from e

    return AuthContext(id=payload["id"], username=payload["username"])
