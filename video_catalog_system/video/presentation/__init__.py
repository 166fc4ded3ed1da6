"""
Video Presentation Layer.

HTTP controllers, routes, and request/response schemas.
"""

from .controllers import VideoController
from .routes import create_video_routes
from .schemas import VideoPayload, VideoResponse

__all__ = ["VideoController", "create_video_routes", "VideoPayload", "VideoResponse"]
