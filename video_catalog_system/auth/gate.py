"""
Authentication gate for protected routes.

Used as a FastAPI dependency: the resolved client is handed to the route
handler as an explicit parameter.
"""

import logging
from typing import Optional

from fastapi import Header

from ..core.exceptions import UnauthenticatedError
from .directory import ClientDirectory
from .models import Client

BEARER_PREFIX = "Bearer "


class AuthGate:
    """Resolves the Authorization header to a registered client"""

    def __init__(self, directory: ClientDirectory, accept_bearer_prefix: bool = True):
        self.directory = directory
        self.accept_bearer_prefix = accept_bearer_prefix
        self.logger = logging.getLogger(__name__)

    def __call__(self, authorization: Optional[str] = Header(default=None)) -> Client:
        return self.authenticate(authorization)

    def authenticate(self, header_value: Optional[str]) -> Client:
        """Return the client for ``header_value`` or raise UnauthenticatedError"""
        token = self.extract_token(header_value)
        if not token:
            self.logger.debug("Rejected request without credentials")
            raise UnauthenticatedError("Missing authorization token")

        client = self.directory.resolve_token(token)
        if client is None:
            self.logger.info("Rejected request with unknown or superseded token")
            raise UnauthenticatedError("Invalid authorization token")

        return client

    def extract_token(self, header_value: Optional[str]) -> str:
        if not header_value:
            return ""
        # The header carries the raw token; "Bearer <token>" is tolerated
        if self.accept_bearer_prefix and header_value.startswith(BEARER_PREFIX):
            return header_value[len(BEARER_PREFIX):].strip()
        return header_value
