"""Auth service — registration, login, token refresh, and profile lookup.

Learn: Service layer separates business logic from HTTP routing.
Routes read cookies/bodies and write cookies; this class validates
input, talks to the users table, and mints token pairs. Every failure
is raised as one of the pcbuilds.errors classes, so routes never build
error responses by hand.

Session lifecycle:
  register / login  → new TokenPair (caller sets cookies)
  refresh           → verify refresh token, re-load user, rotate the pair
  logout            → nothing server-side; the route just clears cookies
"""

import re
import uuid
from typing import Optional

import structlog
from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pcbuilds.auth.jwt import TokenError, TokenIssuer, TokenPair
from pcbuilds.auth.password import (
    MIN_PASSWORD_LENGTH,
    hash_password_async,
    verify_password_async,
)
from pcbuilds.config import Settings
from pcbuilds.db.models import User, new_uuid
from pcbuilds.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    RequestValidationFailed,
    storage_errors,
)
from pcbuilds.schemas.auth import LoginRequest, RegisterRequest

logger = structlog.get_logger()

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def validate_registration(body: RegisterRequest) -> None:
    """Check required fields, email shape, and password length."""
    if not (body.username and body.name and body.email and body.password):
        raise RequestValidationFailed("Please provide all required fields")
    if not EMAIL_PATTERN.fullmatch(body.email):
        raise RequestValidationFailed("Please provide a valid email address")
    if len(body.password) < MIN_PASSWORD_LENGTH:
        raise RequestValidationFailed(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )


class AuthService:
    """Business logic for the session endpoints."""

    def __init__(self, db: AsyncSession, settings: Settings, issuer: TokenIssuer):
        self.db = db
        self.settings = settings
        self.issuer = issuer

    # ─── Register ───────────────────────────────────────

    async def register(self, body: RegisterRequest) -> tuple[User, TokenPair]:
        """Create a user and mint its first token pair.

        Learn: The duplicate check below is a courtesy for a clear error
        message. Two concurrent registrations can both pass it, so the
        unique constraints on users.username / users.email are what
        really decide; an IntegrityError on commit becomes the same
        conflict response.
        """
        validate_registration(body)

        with storage_errors("Error registering user"):
            conflict = await self._find_conflict(body.username, body.email)
            if conflict:
                raise ConflictError(conflict)

            password_hash = await hash_password_async(
                body.password, self.settings.bcrypt_rounds
            )
            user = User(
                id=new_uuid(),
                username=body.username,
                name=body.name,
                email=body.email or None,
                password_hash=password_hash,
            )
            # Minted before commit so a signing failure persists nothing
            tokens = self.issuer.issue_tokens(user)

            self.db.add(user)
            try:
                await self.db.commit()
            except IntegrityError:
                await self.db.rollback()
                conflict = await self._find_conflict(body.username, body.email)
                raise ConflictError(conflict or "User already exists")

        logger.info("auth.registered", user_id=str(user.id), username=user.username)
        return user, tokens

    async def _find_conflict(self, username: str, email: Optional[str]) -> Optional[str]:
        """Return the conflict message for a taken username/email, else None.

        Username collisions win when both fields collide (possibly with
        two different existing users).
        """
        q = select(User).where(
            or_(User.username == username, User.email == (email or None))
        )
        result = await self.db.execute(q)
        existing = result.scalars().all()
        if not existing:
            return None
        if any(u.username == username for u in existing):
            return "Username already exists"
        return "Email already exists"

    # ─── Login ──────────────────────────────────────────

    async def login(self, body: LoginRequest) -> tuple[User, TokenPair]:
        """Authenticate by username or email + password.

        Unknown user, social-login-only account, and wrong password all
        produce the same 401 so the response can't be used to probe which
        accounts exist.
        """
        if not body.username or not body.password:
            raise RequestValidationFailed("Please provide all required fields")

        with storage_errors("Error logging in user"):
            q = select(User).where(
                or_(User.username == body.username, User.email == body.username)
            )
            result = await self.db.execute(q)
            user = result.scalars().first()

        if not user:
            logger.info("auth.login_failed", reason="unknown_user")
            raise AuthenticationError("Invalid credentials")

        if not user.password_hash:
            logger.info(
                "auth.login_failed", reason="no_password", user_id=str(user.id)
            )
            raise AuthenticationError("Invalid credentials")

        if not await verify_password_async(body.password, user.password_hash):
            logger.info(
                "auth.login_failed", reason="wrong_password", user_id=str(user.id)
            )
            raise AuthenticationError("Invalid credentials")

        tokens = self.issuer.issue_tokens(user)
        logger.info("auth.logged_in", user_id=str(user.id))
        return user, tokens

    # ─── Refresh ────────────────────────────────────────

    async def refresh(self, refresh_token: Optional[str]) -> TokenPair:
        """Verify a refresh token and rotate to a brand-new pair."""
        if not refresh_token:
            raise AuthenticationError("No refresh token provided")

        try:
            payload = self.issuer.verify_refresh_token(refresh_token)
        except TokenError as e:
            logger.info("auth.refresh_rejected", reason=str(e))
            raise AuthenticationError("Invalid refresh token", error=str(e)) from e

        user = await self.get_user(payload["id"], "Error refreshing token")
        if not user:
            raise AuthenticationError("User not found")

        tokens = self.issuer.issue_tokens(user)
        logger.info("auth.token_refreshed", user_id=str(user.id))
        return tokens

    # ─── Current user ───────────────────────────────────

    async def get_profile(self, user_id: str) -> User:
        """Load the user behind an access token (404 if since deleted)."""
        user = await self.get_user(user_id, "Error fetching profile")
        if not user:
            raise NotFoundError("User not found")
        return user

    async def get_user(self, user_id: str, error_message: str) -> Optional[User]:
        try:
            uid = uuid.UUID(user_id)
        except (ValueError, TypeError):
            return None
        with storage_errors(error_message):
            return await self.db.get(User, uid)
