"""
Session token generation.
"""

import logging
import secrets
from typing import Optional

from ..core.exceptions import TokenGenerationError

DEFAULT_TOKEN_BYTES = 32


class TokenGenerator:
    """Produces opaque, hex-encoded session tokens from the OS CSPRNG"""

    def __init__(self, default_length: int = DEFAULT_TOKEN_BYTES):
        if default_length < 1:
            raise ValueError(f"Token length must be positive, got {default_length}")
        self.default_length = default_length
        self.logger = logging.getLogger(__name__)

    def generate(self, length: Optional[int] = None) -> str:
        """Return ``2 * length`` hex characters of fresh randomness.

        Raises TokenGenerationError if the entropy source fails; an empty
        string is never returned as a token.
        """
        if length is None:
            length = self.default_length
        if length < 1:
            raise ValueError(f"Token length must be positive, got {length}")

        try:
            raw = secrets.token_bytes(length)
        except (OSError, NotImplementedError) as e:
            self.logger.error(f"Entropy source failed while generating token: {e}")
            raise TokenGenerationError("Could not generate session token") from e

        return raw.hex()


def mask_token(token: str) -> str:
    """Short, log-safe form of a token"""
    if not token:
        return "<empty>"
    return f"{token[:6]}..."
