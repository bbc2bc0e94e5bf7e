"""
Static-password admin login with opaque session tokens.
"""

import hmac
import logging
import secrets
from typing import Optional

logger = logging.getLogger(__name__)


class AdminAuth:
    def __init__(self, password: str):
        self._password = password
        self._tokens: set[str] = set()

    def login(self, password: str) -> Optional[str]:
        """Return a new session token, or None if the password is wrong."""
        if not hmac.compare_digest(password.encode(), self._password.encode()):
            logger.warning("Rejected admin login attempt")
            return None
        token = secrets.token_urlsafe(32)
        self._tokens.add(token)
        return token

    def logout(self, token: str) -> None:
        self._tokens.discard(token)

    def is_authenticated(self, token: Optional[str]) -> bool:
        return token is not None and token in self._tokens
