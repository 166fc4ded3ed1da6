"""
Video Infrastructure Layer.

Concrete implementations of the video domain interfaces.
"""

from .repositories import InMemoryVideoRepository

__all__ = ["InMemoryVideoRepository"]
