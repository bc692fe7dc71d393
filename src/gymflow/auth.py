"""
Credential hashing and session tokens.

Passwords are hashed with werkzeug's salted hashes; sessions are HS256 JWTs
carrying the user id and name.
"""
import logging
from datetime import datetime, timedelta, timezone

import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from .errors import AuthError
from .models.user import User

logger = logging.getLogger(__name__)


class Authenticator:
    """Hashes passwords and issues/validates session tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256", expires_days: int = 14):
        self.secret = secret
        self.algorithm = algorithm
        self.expires = timedelta(days=expires_days)

    def hash_password(self, password: str) -> str:
        return generate_password_hash(password)

    def check_password(self, user: User, password: str) -> bool:
        if not user.password_hash:
            return False
        return check_password_hash(user.password_hash, password)

    def issue_token(self, user: User) -> str:
        """Sign a session token for a logged-in user."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user.id),
            "id": user.id,
            "userName": user.user_name,
            "iat": now,
            "exp": now + self.expires,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify_token(self, token: str) -> int:
        """Validate a session token and return the user id it was issued for."""
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise AuthError("Token expired") from None
        except jwt.InvalidTokenError as e:
            logger.info("Rejected session token: %s", e)
            raise AuthError("Invalid token") from None

        user_id = payload.get("id")
        if user_id is None:
            raise AuthError("Token missing user ID")
        return int(user_id)

    def verify_header(self, authorization: str | None) -> int:
        """Validate an ``Authorization: Bearer <token>`` header value."""
        if not authorization:
            raise AuthError("Missing authentication. Provide an Authorization header.")
        if not authorization.startswith("Bearer "):
            raise AuthError("Invalid authorization header format")
        return self.verify_token(authorization.split(" ", 1)[1])
