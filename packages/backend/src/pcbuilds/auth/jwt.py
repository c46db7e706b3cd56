"""JWT token pair creation and verification.

Learn: JWT (JSON Web Token) provides stateless authentication.
- Access token: short-lived (15 min), payload {id, username}
- Refresh token: long-lived (7 days), payload {id}

Each token carries a random jti, so a rotated pair never repeats the
previous one even within the same second.

The two kinds are signed with DIFFERENT secrets. A leaked refresh
secret cannot forge access tokens, and an access token can never be
replayed against the refresh endpoint (its signature won't verify).
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from pcbuilds.config import Settings
from pcbuilds.errors import ConfigurationError


class TokenError(Exception):
    """Raised when token verification fails (expired, bad signature, malformed)."""


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str


class TokenIssuer:
    """Mints and verifies access/refresh tokens from explicit settings."""

    def __init__(self, settings: Settings):
        self.settings = settings

    # ─── Issuing ────────────────────────────────────────

    def issue_tokens(self, user, now: Optional[datetime] = None) -> TokenPair:
        """Create a fresh access/refresh pair for a user.

        `user` needs an `id` and a `username` (falls back to `email`).
        `now` defaults to the current time; a past `now` yields a pair
        that may already be expired.
        """
        issued_at = now or datetime.now(timezone.utc)
        user_id = str(user.id)

        access_payload = {
            "id": user_id,
            "username": user.username or user.email,
            "jti": uuid.uuid4().hex,
            "iat": issued_at,
            "exp": issued_at
            + timedelta(minutes=self.settings.access_token_expire_minutes),
        }
        refresh_payload = {
            "id": user_id,
            "jti": uuid.uuid4().hex,
            "iat": issued_at,
            "exp": issued_at + timedelta(days=self.settings.refresh_token_expire_days),
        }
        return TokenPair(
            access_token=self._sign(access_payload, self._access_secret()),
            refresh_token=self._sign(refresh_payload, self._refresh_secret()),
        )

    def _sign(self, payload: dict, secret: str) -> str:
        return jwt.encode(payload, secret, algorithm=self.settings.jwt_algorithm)

    def _access_secret(self) -> str:
        if not self.settings.access_token_secret:
            raise ConfigurationError(
                error="PCBUILDS_ACCESS_TOKEN_SECRET is not set"
            )
        return self.settings.access_token_secret

    def _refresh_secret(self) -> str:
        if not self.settings.refresh_token_secret:
            raise ConfigurationError(
                error="PCBUILDS_REFRESH_TOKEN_SECRET is not set"
            )
        return self.settings.refresh_token_secret

    # ─── Verification ───────────────────────────────────

    def verify_access_token(self, token: str) -> dict:
        """Decode an access token. Raises TokenError on failure."""
        return self._verify(token, self._access_secret(), required=["id", "username"])

    def verify_refresh_token(self, token: str) -> dict:
        """Decode a refresh token. Raises TokenError on failure."""
        return self._verify(token, self._refresh_secret(), required=["id"])

    def _verify(self, token: str, secret: str, required: list[str]) -> dict:
        try:
            return jwt.decode(
                token,
                secret,
                algorithms=[self.settings.jwt_algorithm],
                options={"require": ["exp", *required]},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenError("jwt expired") from e
        except jwt.InvalidTokenError as e:
            raise TokenError(str(e) or "invalid token") from e
