"""Password hashing tests."""

import pytest

from pcbuilds.auth.password import (
    hash_password,
    hash_password_async,
    verify_password,
    verify_password_async,
)


def test_hash_and_verify():
    hashed = hash_password("password123", rounds=4)
    assert hashed.startswith("$2b$04$")
    assert verify_password("password123", hashed)
    assert not verify_password("password124", hashed)


def test_hashes_are_salted():
    assert hash_password("password123", rounds=4) != hash_password("password123", rounds=4)


def test_default_cost_factor_is_10():
    assert hash_password("password123").startswith("$2b$10$")


def test_malformed_hash_never_matches():
    assert not verify_password("password123", "not-a-bcrypt-hash")


@pytest.mark.asyncio
async def test_async_wrappers():
    hashed = await hash_password_async("password123", rounds=4)
    assert await verify_password_async("password123", hashed)
    assert not await verify_password_async("nope-nope", hashed)
