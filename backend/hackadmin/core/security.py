from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

import bcrypt
import jwt

from hackadmin.core.config import Settings, settings


@dataclass(frozen=True)
class TokenClaims:
    """Verified contents of a session token."""
    admin_id: str
    email: str
    is_super_admin: bool
    issued_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None


@dataclass(frozen=True)
class TokenInvalid:
    reason: str


TokenResult = Union[TokenClaims, TokenInvalid]


def _timestamp(value) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.fromtimestamp(int(value), tz=timezone.utc)


def create_session_token(
    admin_id: str,
    email: str,
    is_super_admin: bool,
    remember: bool = False,
    config: Settings = settings,
) -> str:
    """Sign a session token for an admin.

    Remembered sessions last SESSION_MAX_AGE_SECONDS, the others expire after
    SESSION_DEFAULT_EXPIRE_HOURS.
    """
    now = datetime.now(timezone.utc)
    if remember:
        expire = now + timedelta(seconds=config.SESSION_MAX_AGE_SECONDS)
    else:
        expire = now + timedelta(hours=config.SESSION_DEFAULT_EXPIRE_HOURS)

    to_encode = {
        "sub": admin_id,
        "adminId": admin_id,
        "email": email,
        "isSuperAdmin": bool(is_super_admin),
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(to_encode, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def verify_session_token(token: Optional[str], config: Settings = settings) -> TokenResult:
    """Verify signature and expiry, returning TokenClaims or TokenInvalid."""
    if not token:
        return TokenInvalid("missing token")

    try:
        payload = jwt.decode(
            token,
            config.JWT_SECRET,
            algorithms=[config.JWT_ALGORITHM]
        )
    except jwt.ExpiredSignatureError:
        return TokenInvalid("token expired")
    except jwt.PyJWTError as e:
        return TokenInvalid(f"invalid token: {e}")

    admin_id = payload.get("adminId") or payload.get("sub")
    if not admin_id:
        return TokenInvalid("token has no subject")

    return TokenClaims(
        admin_id=str(admin_id),
        email=str(payload.get("email", "")),
        is_super_admin=bool(payload.get("isSuperAdmin", False)),
        issued_at=_timestamp(payload.get("iat")),
        expires_at=_timestamp(payload.get("exp")),
    )


# ==============================================================================
# PASSWORDS
# ==============================================================================

# bcrypt only reads the first 72 bytes and bcrypt>=5 refuses anything longer
MAX_PASSWORD_BYTES = 72
PASSWORD_TOO_LONG = f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes"


def password_too_long(password: Optional[str]) -> bool:
    return bool(password) and len(password.encode()) > MAX_PASSWORD_BYTES


def hash_password(password: str, rounds: int = settings.BCRYPT_ROUNDS) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds)).decode()


def is_password_hash(value: Optional[str]) -> bool:
    return bool(value) and value.startswith(("$2a$", "$2b$", "$2y$"))


def verify_password(password: str, stored: Optional[str]) -> bool:
    """Check a password against a stored value.

    Accounts created before hashing was introduced still hold the plaintext,
    which is compared directly.
    """
    if not stored or password is None:
        return False
    if not is_password_hash(stored):
        return password == stored
    try:
        return bcrypt.checkpw(password.encode(), stored.encode())
    except ValueError:
        return False
