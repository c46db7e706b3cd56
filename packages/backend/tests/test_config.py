"""Settings tests — env loading and production guards."""

import pytest
from pydantic import ValidationError

from pcbuilds.config import Settings


def test_defaults():
    settings = Settings()
    assert settings.access_token_max_age == 15 * 60
    assert settings.refresh_token_max_age == 7 * 24 * 60 * 60
    assert settings.refresh_cookie_path == "/auth/refresh-token"
    assert settings.bcrypt_rounds == 10


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("PCBUILDS_ACCESS_TOKEN_SECRET", "from-env")
    monkeypatch.setenv("PCBUILDS_PORT", "9001")
    settings = Settings()
    assert settings.access_token_secret == "from-env"
    assert settings.port == 9001


def test_production_requires_secrets():
    with pytest.raises(ValidationError, match="must be set"):
        Settings(environment="production")


def test_production_requires_distinct_secrets():
    with pytest.raises(ValidationError, match="must differ"):
        Settings(
            environment="production",
            access_token_secret="same",
            refresh_token_secret="same",
        )


def test_production_with_secrets():
    settings = Settings(
        environment="production",
        access_token_secret="a" * 32,
        refresh_token_secret="b" * 32,
    )
    assert settings.environment == "production"
