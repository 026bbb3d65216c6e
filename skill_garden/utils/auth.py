"""Password hashing and access token utilities"""
import base64
import hashlib
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from skill_garden.config import Settings
from skill_garden.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

PBKDF2_ALGORITHM = "sha256"
PBKDF2_ITERATIONS = 260_000
SALT_BYTES = 16


def hash_password(password: str, iterations: int = PBKDF2_ITERATIONS) -> str:
    """
    Hash a password with a random salt.

    Format: pbkdf2_sha256$<iterations>$<salt b64>$<hash b64>
    """
    salt = secrets.token_bytes(SALT_BYTES)
    digest = hashlib.pbkdf2_hmac(PBKDF2_ALGORITHM, password.encode("utf-8"), salt, iterations)
    return "$".join([
        f"pbkdf2_{PBKDF2_ALGORITHM}",
        str(iterations),
        base64.b64encode(salt).decode("ascii"),
        base64.b64encode(digest).decode("ascii"),
    ])


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored hash"""
    try:
        scheme, iterations, salt_b64, digest_b64 = password_hash.split("$")
    except ValueError:
        logger.warning("Malformed password hash")
        return False

    if scheme != f"pbkdf2_{PBKDF2_ALGORITHM}":
        logger.warning(f"Unsupported password hash scheme: {scheme}")
        return False

    salt = base64.b64decode(salt_b64)
    expected = base64.b64decode(digest_b64)
    actual = hashlib.pbkdf2_hmac(PBKDF2_ALGORITHM, password.encode("utf-8"), salt, int(iterations))
    return secrets.compare_digest(actual, expected)


def create_access_token(
    user_id: int,
    settings: Settings,
    now: Optional[datetime] = None
) -> str:
    """Issue a signed token identifying the user"""
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.token_expire_days),
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.token_algorithm)


def decode_access_token(token: str, settings: Settings) -> int:
    """
    Verify a token and return the user id it carries

    Raises:
        AuthenticationError: invalid signature, expired or malformed token
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.token_algorithm])
        return int(payload["sub"])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token expired", user_message="Invalid or expired token")
    except (jwt.InvalidTokenError, KeyError, ValueError):
        raise AuthenticationError("Invalid token", user_message="Invalid or expired token")
