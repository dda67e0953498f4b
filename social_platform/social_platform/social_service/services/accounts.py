"""
Account service: signup, login, profile lookup and password changes.
"""
import logging

from sqlalchemy.orm import Session

from ..auth import Identity, TokenIssuer, hash_password, verify_password
from ..errors import InvalidCredentialsError, UserNotFoundError
from ..models import User
from .common import require_user_id, service_operation

logger = logging.getLogger(__name__)

# Checked against when the username is unknown
_DUMMY_HASH = hash_password("dummy-password-for-unknown-users")


class AccountService:
    def __init__(self, db: Session, token_issuer: TokenIssuer):
        self.db = db
        self.token_issuer = token_issuer

    @service_operation("Error creating user", include_cause=True)
    def signup(self, username: str, password: str) -> User:
        """
        Create a user with a hashed password and no followers.

        A duplicate username is rejected by the store's unique constraint and
        surfaces as a generic creation failure carrying the store's message.
        """
        user = User(
            username=username,
            password=hash_password(password),
            followers_count=0,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        logger.info("User created: user_id=%s, username=%s", user.id, user.username)
        return user

    @service_operation("Error logging in")
    def login(self, username: str, password: str) -> str:
        """
        Check credentials and issue a bearer token.

        Unknown usernames and wrong passwords raise the same
        ``InvalidCredentialsError`` so callers cannot tell them apart.
        """
        user = self.db.query(User).filter(User.username == username).first()
        if not user:
            # Spend the same hashing time as a real check
            verify_password(password, _DUMMY_HASH)
            logger.info("Login failed for username=%s", username)
            raise InvalidCredentialsError()
        if not verify_password(password, user.password):
            logger.info("Login failed for username=%s", username)
            raise InvalidCredentialsError()

        logger.info("Successful login: user_id=%s, username=%s", user.id, user.username)
        return self.token_issuer.issue(user.id, user.username)

    @service_operation("Error fetching user")
    def me(self, identity: Identity) -> dict:
        user_id = require_user_id(identity)
        user = self._get(user_id)
        return user.to_profile()

    @service_operation("Error updating password")
    def update_password(self, identity: Identity, new_password: str) -> None:
        # Tokens issued before the change stay valid until they expire
        user_id = require_user_id(identity)
        user = self._get(user_id)
        user.password = hash_password(new_password)
        self.db.commit()
        logger.info("Password updated: user_id=%s", user_id)

    @service_operation("Error fetching user")
    def get_user(self, user_id: int) -> dict:
        return self._get(user_id).to_profile()

    def _get(self, user_id: int) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if not user:
            raise UserNotFoundError()
        return user
