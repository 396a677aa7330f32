import uuid
from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError, InvalidHashError
from .config import SECRET_KEY, SESSION_TTL_MINUTES, ALGORITHM, JWT_ISSUER, JWT_AUDIENCE, SESSION_COOKIE_NAME
from datetime import timedelta, datetime, timezone
from jose import jwt

ph = PasswordHasher()


def hash_password(password: str, *, salt: bytes | None = None) -> str:
    return ph.hash(password, salt=salt)


def verify_password(password: str, hashed_password: str) -> bool:
    try:
        return ph.verify(hashed_password, password)
    except (VerifyMismatchError, InvalidHashError):
        return False


def create_session_token(subject: str) -> str:
    now = datetime.now(timezone.utc)
    expire = now + timedelta(minutes=SESSION_TTL_MINUTES)
    payload = {
        "sub": str(subject),
        "iat": int(now.timestamp()),
        "nbf": int(now.timestamp()),
        "exp": int(expire.timestamp()),
        "jti": str(uuid.uuid4()),
        "typ": "session",
        "iss": JWT_ISSUER,
        "aud": JWT_AUDIENCE
    }
    return jwt.encode(payload, SECRET_KEY, algorithm=ALGORITHM)


def session_cookie(token: str) -> dict:
    return {
        "key": SESSION_COOKIE_NAME,
        "value": token,
        "max_age": SESSION_TTL_MINUTES * 60,
        "httponly": True,
        "samesite": "lax",
        "path": "/",
    }
