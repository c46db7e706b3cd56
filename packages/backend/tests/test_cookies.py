"""Cookie helper tests — attributes, scoping, and clearing."""

from starlette.responses import Response

from pcbuilds.auth.cookies import clear_auth_cookies, set_auth_cookies


def _cookie_headers(response: Response) -> dict[str, str]:
    return {
        value.decode().split("=", 1)[0]: value.decode().lower()
        for key, value in response.raw_headers
        if key == b"set-cookie"
    }


def test_set_auth_cookies(settings):
    response = Response()
    set_auth_cookies(response, "acc", "ref", settings)
    cookies = _cookie_headers(response)

    access = cookies["access_token"]
    assert access.startswith("access_token=acc;")
    assert "max-age=900" in access
    assert "path=/;" in access
    for flag in ("httponly", "secure", "samesite=none"):
        assert flag in access

    refresh = cookies["refresh_token"]
    assert refresh.startswith("refresh_token=ref;")
    assert "max-age=604800" in refresh
    assert "path=/auth/refresh-token" in refresh
    for flag in ("httponly", "secure", "samesite=none"):
        assert flag in refresh


def test_clear_auth_cookies(settings):
    response = Response()
    clear_auth_cookies(response, settings)
    cookies = _cookie_headers(response)

    assert set(cookies) == {"access_token", "refresh_token"}
    for header in cookies.values():
        assert "max-age=0" in header
        assert "httponly" in header
        assert "secure" in header
    assert "path=/;" in cookies["access_token"]
    assert "path=/auth/refresh-token" in cookies["refresh_token"]
