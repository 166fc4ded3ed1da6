"""
Video Module for the Video Catalog System.

Token-gated create/read/update/delete of video records, laid out as
domain, infrastructure and presentation layers.
"""

from .domain.models import Video
from .domain.interfaces import VideoRepository
from .infrastructure.repositories import InMemoryVideoRepository
from .integration import VideoModule, create_video_module

__all__ = ["Video", "VideoRepository", "InMemoryVideoRepository", "VideoModule", "create_video_module"]
