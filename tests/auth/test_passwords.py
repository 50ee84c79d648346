"""Tests for bcrypt password hashing."""

import pytest

from contenthub.auth.passwords import (
    hash_password,
    hash_password_async,
    verify_password,
    verify_password_async,
)


def test_hash_and_verify():
    hashed = hash_password("correct horse", rounds=4)

    assert hashed != "correct horse"
    assert hashed.startswith("$2")
    assert verify_password("correct horse", hashed) is True
    assert verify_password("battery staple", hashed) is False


def test_hashes_are_salted():
    assert hash_password("same", rounds=4) != hash_password("same", rounds=4)


def test_missing_hash_never_verifies():
    assert verify_password("anything", None) is False
    assert verify_password("anything", "") is False


@pytest.mark.asyncio
async def test_async_helpers(monkeypatch):
    from contenthub.config import settings

    monkeypatch.setattr(settings, "bcrypt_rounds", 4)
    hashed = await hash_password_async("secret")

    assert await verify_password_async("secret", hashed) is True
    assert await verify_password_async("wrong", hashed) is False
