"""
Security: password hashing and JWT (best practices for APIs).
Challenge: Secure auth, no plain-text passwords, token validation.
"""

from datetime import datetime, timezone, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from joinapp.config import get_settings
from joinapp.core.exceptions import InvalidTokenError
from joinapp.schemas.user import UserClaims

settings = get_settings()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """One-way hash for storage. Never store plain passwords."""
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """Constant-time comparison for login."""
    return pwd_context.verify(plain, hashed)


def create_access_token(user_uid: str, role_uid: str) -> str:
    """Create JWT for an authenticated user. Subject is the user UID."""
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.jwt_expire_minutes)
    to_encode = {"sub": user_uid, "role_uid": role_uid, "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any] | None:
    """Decode and validate JWT. Returns payload or None if invalid."""
    try:
        return jwt.decode(
            token, settings.secret_key, algorithms=[settings.jwt_algorithm]
        )
    except JWTError:
        return None


def get_user_data(token: str) -> UserClaims:
    """Resolve a bearer token (with or without the "Bearer " prefix) to user claims."""
    if token[:7].lower() == "bearer ":
        token = token[7:]
    token = token.strip()
    if not token:
        raise InvalidTokenError("missing token")
    payload = decode_access_token(token)
    if not payload or not payload.get("sub"):
        raise InvalidTokenError()
    return UserClaims(user_uid=payload["sub"], role_uid=payload.get("role_uid", ""))
