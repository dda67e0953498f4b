from passlib.context import CryptContext
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
import jwt

# Use pbkdf2_sha256 to avoid external bcrypt backend issues in some environments
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, decoded from a bearer token by the gatekeeper."""

    id: Optional[int]
    username: Optional[str] = None


class TokenIssuer:
    """
    Issues and decodes signed, time-limited bearer tokens.

    Tokens embed the user's id and username. Verification failures
    (bad signature, expiry, missing ``exp``) surface as ``jwt.PyJWTError``.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(self, user_id: int, username: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "id": user_id,
            "username": username,
            "iat": now,
            "exp": now + timedelta(minutes=self.expire_minutes),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> Identity:
        data = jwt.decode(
            token,
            self.secret_key,
            algorithms=[self.algorithm],
            options={"require": ["exp"]},
        )
        user_id = data.get("id")
        # bool is an int subclass; neither it nor strings are valid ids
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            user_id = None
        return Identity(id=user_id, username=data.get("username"))
