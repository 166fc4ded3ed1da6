"""
Client account models.
"""

from dataclasses import dataclass


@dataclass
class Client:
    """Registered client account"""

    id: str
    username: str
    password: str  # Plaintext, compared by exact match
    token: str = ""  # Empty until the first successful login

    @property
    def is_logged_in(self) -> bool:
        return bool(self.token)

    def __repr__(self) -> str:
        return f"Client(id={self.id!r}, username={self.username!r}, logged_in={self.is_logged_in})"
