"""
Password hashing and bearer token handling.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
import jwt

from jobdesk.config.logging import get_logger
from jobdesk.config.settings import settings
from jobdesk.domain.exceptions.auth_error import AuthenticationError

logger = get_logger(__name__)


def hash_password(plain: str) -> str:
    """Hash a plaintext password using bcrypt."""
    hashed = bcrypt.hashpw(
        plain.encode("utf-8"), bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    )
    return hashed.decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """Check a plaintext password against a bcrypt hash."""
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


class AuthService:
    """Authenticate users and issue/verify access tokens."""

    def __init__(self, user_repository):
        self.user_repository = user_repository

    async def authenticate(self, username: str, password: str):
        """
        Return the user for valid credentials.

        Raises:
            AuthenticationError: if the username is unknown or the password is wrong
        """
        user = await self.user_repository.get_by_username(username)
        if not user or not verify_password(password, user.password):
            logger.info("Login rejected", username=username)
            raise AuthenticationError("Incorrect username or password")
        return user

    def create_access_token(self, user, expires_delta: Optional[timedelta] = None) -> str:
        """Issue a signed token for the user."""
        now = datetime.now(timezone.utc)
        expire = now + (
            expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        )
        payload = {
            "sub": str(user.id),
            "username": user.username,
            "role": user.role.value,
            "iat": now,
            "exp": expire,
        }
        return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.ALGORITHM)

    def decode_access_token(self, token: str) -> Dict[str, Any]:
        """
        Decode and verify a token.

        Raises:
            AuthenticationError: if the token is expired, malformed or badly signed
        """
        try:
            return jwt.decode(
                token, settings.JWT_SECRET_KEY, algorithms=[settings.ALGORITHM]
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired")
        except jwt.InvalidTokenError:
            raise AuthenticationError("Invalid token")

    async def get_user_from_token(self, token: str):
        """Resolve the principal a token was issued to."""
        payload = self.decode_access_token(token)
        try:
            user_id = int(payload["sub"])
        except (KeyError, ValueError):
            raise AuthenticationError("Invalid token")

        user = await self.user_repository.get_by_id(user_id)
        if not user:
            raise AuthenticationError("Invalid user")
        return user
