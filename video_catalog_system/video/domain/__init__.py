"""
Video Domain Layer.

Contains the video entity and the repository contract.
No external dependencies - only Python standard library and domain concepts.
"""

from .models import Video
from .interfaces import VideoRepository

__all__ = ["Video", "VideoRepository"]
