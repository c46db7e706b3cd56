"""Session cookie helpers.

Learn: Both tokens travel as HttpOnly cookies so page scripts can't
read them. SameSite=None + Secure lets a frontend on another origin
send them with credentialed requests.

The refresh cookie is path-scoped to the refresh endpoint, so the
browser only ever sends it there and never on normal
API calls.
"""

from fastapi import Response

from pcbuilds.config import Settings


def _cookie_params(path: str) -> dict:
    return {
        "path": path,
        "httponly": True,
        "secure": True,
        "samesite": "none",
    }


def set_auth_cookies(
    response: Response,
    access_token: str,
    refresh_token: str,
    settings: Settings,
) -> None:
    """Attach both tokens to the response."""
    response.set_cookie(
        key=settings.access_cookie_name,
        value=access_token,
        max_age=settings.access_token_max_age,
        **_cookie_params("/"),
    )
    response.set_cookie(
        key=settings.refresh_cookie_name,
        value=refresh_token,
        max_age=settings.refresh_token_max_age,
        **_cookie_params(settings.refresh_cookie_path),
    )


def clear_auth_cookies(response: Response, settings: Settings) -> None:
    """Overwrite both cookies with an empty value and Max-Age=0.

    Learn: Paths must match the ones used when setting, otherwise the
    browser treats them as different cookies and keeps the originals.
    """
    response.set_cookie(
        key=settings.access_cookie_name,
        value="",
        max_age=0,
        **_cookie_params("/"),
    )
    response.set_cookie(
        key=settings.refresh_cookie_name,
        value="",
        max_age=0,
        **_cookie_params(settings.refresh_cookie_path),
    )
