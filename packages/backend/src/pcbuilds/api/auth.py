"""Auth API — registration, login, logout, refresh, and whoami.

Learn: Routes for the cookie-based session lifecycle:
- POST /auth/register      → create account, set cookies (201)
- POST /auth/login         → username-or-email + password, set cookies
- POST /auth/logout        → clear cookies (no server-side state)
- POST /auth/refresh-token → refresh cookie → rotated token pair
- GET  /auth/user          → current user (requires access cookie)

Tokens are never put in response bodies; they only travel as
HttpOnly cookies written by pcbuilds.auth.cookies.
"""

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from pcbuilds.auth.cookies import clear_auth_cookies, set_auth_cookies
from pcbuilds.auth.dependencies import (
    AuthContext,
    get_app_settings,
    get_token_issuer,
    require_auth,
)
from pcbuilds.auth.jwt import TokenIssuer
from pcbuilds.config import Settings
from pcbuilds.db.engine import get_db
from pcbuilds.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserProfile,
)
from pcbuilds.services.auth_service import AuthService

router = APIRouter(prefix="/auth")


def _svc(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    return AuthService(db, settings, issuer)


# ─── Register ────────────────────────────────────────────


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    body: RegisterRequest,
    response: Response,
    svc: AuthService = Depends(_svc),
):
    """Create a new user account and sign it in."""
    user, tokens = await svc.register(body)
    set_auth_cookies(response, tokens.access_token, tokens.refresh_token, svc.settings)
    return {"message": "User registered successfully", "user": user}


# ─── Login ───────────────────────────────────────────────


@router.post("/login", response_model=AuthResponse)
async def login(
    body: LoginRequest,
    response: Response,
    svc: AuthService = Depends(_svc),
):
    """Login with username (or email) and password → session cookies."""
    user, tokens = await svc.login(body)
    set_auth_cookies(response, tokens.access_token, tokens.refresh_token, svc.settings)
    return {"message": "Logged in successfully", "user": user}


# ─── Logout ──────────────────────────────────────────────


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    settings: Settings = Depends(get_app_settings),
):
    """Clear both cookies. Issued tokens stay valid until they expire."""
    clear_auth_cookies(response, settings)
    return {"message": "Logged out successfully"}


# ─── Refresh ────────────────────────────────────────────


@router.post("/refresh-token", response_model=MessageResponse)
async def refresh_token(
    request: Request,
    response: Response,
    svc: AuthService = Depends(_svc),
):
    """Exchange the refresh cookie for a new access + refresh pair."""
    tokens = await svc.refresh(request.cookies.get(svc.settings.refresh_cookie_name))
    set_auth_cookies(response, tokens.access_token, tokens.refresh_token, svc.settings)
    return {"message": "Token refreshed successfully"}


# ─── Current user ───────────────────────────────────────


@router.get("/user", response_model=UserProfile)
async def get_user(
    identity: AuthContext = Depends(require_auth),
    svc: AuthService = Depends(_svc),
):
    """Get the signed-in user's record (no password hash)."""
    return await svc.get_profile(identity.id)
