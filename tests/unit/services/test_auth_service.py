"""
Unit tests for password hashing and token handling.
"""

from datetime import timedelta
from types import SimpleNamespace
from unittest.mock import AsyncMock

import jwt
import pytest

from jobdesk.application.services.auth_service import (
    AuthService,
    hash_password,
    verify_password,
)
from jobdesk.config.settings import settings
from jobdesk.domain.exceptions.auth_error import AuthenticationError
from jobdesk.domain.value_objects.role import Role


@pytest.fixture
def user():
    return SimpleNamespace(
        id=7,
        username="dispatcher",
        password=hash_password("s3cret"),
        role=Role.MODERATOR,
    )


@pytest.fixture
def user_repository(user):
    repo = AsyncMock()
    repo.get_by_username = AsyncMock(
        side_effect=lambda name: user if name == user.username else None
    )
    repo.get_by_id = AsyncMock(side_effect=lambda user_id: user if user_id == user.id else None)
    return repo


class TestPasswords:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("s3cret")
        assert hashed != "s3cret"
        assert hashed.startswith("$2")

    def test_verify(self):
        hashed = hash_password("s3cret")
        assert verify_password("s3cret", hashed) is True
        assert verify_password("wrong", hashed) is False

    def test_verify_against_non_bcrypt_value(self):
        assert verify_password("s3cret", "plaintext") is False


class TestAuthService:
    @pytest.mark.asyncio
    async def test_authenticate(self, user_repository, user):
        service = AuthService(user_repository)
        assert await service.authenticate("dispatcher", "s3cret") is user

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username,password", [("dispatcher", "nope"), ("ghost", "s3cret")])
    async def test_authenticate_rejects(self, user_repository, username, password):
        service = AuthService(user_repository)
        with pytest.raises(AuthenticationError, match="Incorrect username or password"):
            await service.authenticate(username, password)

    def test_token_claims(self, user_repository, user):
        service = AuthService(user_repository)
        payload = service.decode_access_token(service.create_access_token(user))

        assert payload["sub"] == "7"
        assert payload["username"] == "dispatcher"
        assert payload["role"] == "Moderator"
        assert payload["exp"] - payload["iat"] == settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60

    def test_expired_token(self, user_repository, user):
        service = AuthService(user_repository)
        token = service.create_access_token(user, expires_delta=timedelta(seconds=-10))

        with pytest.raises(AuthenticationError, match="expired"):
            service.decode_access_token(token)

    def test_token_signed_with_other_key(self, user_repository):
        service = AuthService(user_repository)
        token = jwt.encode({"sub": "7"}, "another-key", algorithm="HS256")

        with pytest.raises(AuthenticationError, match="Invalid token"):
            service.decode_access_token(token)

    @pytest.mark.asyncio
    async def test_get_user_from_token(self, user_repository, user):
        service = AuthService(user_repository)
        assert await service.get_user_from_token(service.create_access_token(user)) is user

    @pytest.mark.asyncio
    async def test_token_for_deleted_user(self, user_repository, user):
        service = AuthService(user_repository)
        token = service.create_access_token(SimpleNamespace(id=99, username="gone", role=Role.USER))

        with pytest.raises(AuthenticationError):
            await service.get_user_from_token(token)
