import logging
import secrets
from typing import Optional

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, expected_token: Optional[str]):
        self.expected_token = expected_token

    @property
    def is_configured(self) -> bool:
        return bool(self.expected_token)

    def verify(self, token: Optional[str]) -> bool:
        if not self.is_configured:
            logger.warning("API_TOKEN is not configured; rejecting request")
            return False
        if not token:
            return False
        return secrets.compare_digest(token.encode("utf-8"), self.expected_token.encode("utf-8"))
