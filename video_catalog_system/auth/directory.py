"""
Client directory for the Video Catalog System.

This module keeps the registry of client accounts and owns credential
checks and session token issuance, in a thread-safe manner.
"""

import threading
import logging
from dataclasses import replace
from typing import Dict, List, Optional

from ..core.exceptions import InvalidCredentialsError, TokenGenerationError, UsernameTakenError
from .models import Client
from .tokens import TokenGenerator, mask_token

MAX_TOKEN_ATTEMPTS = 3


class ClientDirectory:
    """Thread-safe registry of client accounts"""

    def __init__(self, token_generator: Optional[TokenGenerator] = None):
        self.logger = logging.getLogger(__name__)
        self.token_generator = token_generator or TokenGenerator()
        self._lock = threading.RLock()

        # Registration order plus lookup indexes
        self._clients: List[Client] = []
        self._by_username: Dict[str, Client] = {}
        self._by_token: Dict[str, Client] = {}
        self._last_id = 0

    def register(self, username: str, password: str) -> str:
        """Register a new client and return its id"""
        with self._lock:
            if username in self._by_username:
                self.logger.info(f"Registration rejected, username taken: {username}")
                raise UsernameTakenError(username)

            self._last_id += 1
            client = Client(id=f"client{self._last_id}", username=username, password=password)
            self._clients.append(client)
            self._by_username[username] = client

            self.logger.info(f"Registered client {client.id} ({username})")
            return client.id

    def login(self, username: str, password: str) -> str:
        """Check credentials and issue a fresh token, replacing any previous one"""
        with self._lock:
            client = self._by_username.get(username)
            if client is None or client.password != password:
                self.logger.info(f"Login failed for username: {username}")
                raise InvalidCredentialsError("Invalid username or password")

            token = self._new_unique_token()

            if client.token:
                self._by_token.pop(client.token, None)
            client.token = token
            self._by_token[token] = client

            self.logger.info(f"Client {client.id} logged in, token {mask_token(token)}")
            return token

    def resolve_token(self, token: Optional[str]) -> Optional[Client]:
        """Return the client currently holding ``token``, if any"""
        if not token:
            return None

        with self._lock:
            client = self._by_token.get(token)
            if client is None:
                self.logger.debug(f"Token did not resolve: {mask_token(token)}")
                return None
            return replace(client)

    def get_client(self, client_id: str) -> Optional[Client]:
        with self._lock:
            for client in self._clients:
                if client.id == client_id:
                    return replace(client)
            return None

    def count(self) -> int:
        with self._lock:
            return len(self._clients)

    def __len__(self) -> int:
        return self.count()

    def _new_unique_token(self) -> str:
        # Caller holds the lock
        for _ in range(MAX_TOKEN_ATTEMPTS):
            token = self.token_generator.generate()
            if not token:
                raise TokenGenerationError("Token generator returned an empty token")
            if token not in self._by_token:
                return token
            self.logger.warning("Generated token collided with a live token, retrying")
        raise TokenGenerationError("Could not generate a unique session token")
