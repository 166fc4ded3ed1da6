"""
Video HTTP Controllers.

Handle HTTP requests and responses for video operations.
"""

import logging
from typing import List

from ...auth.models import Client
from ...core.exceptions import VideoNotFoundError
from ..domain.interfaces import VideoRepository
from ..domain.models import Video
from .schemas import VideoPayload, VideoResponse


class VideoController:
    """Controller for video CRUD operations"""

    def __init__(self, repository: VideoRepository):
        self.repository = repository
        self.logger = logging.getLogger(__name__)

    def list_videos(self, client: Client) -> List[VideoResponse]:
        videos = self.repository.list_all()
        self.logger.debug(f"{client.id} listed {len(videos)} videos")
        return [self._convert_to_response(video) for video in videos]

    def get_video(self, video_id: str, client: Client) -> VideoResponse:
        video = self.repository.get_by_id(video_id)
        if video is None:
            raise VideoNotFoundError(video_id)
        return self._convert_to_response(video)

    def create_video(self, payload: VideoPayload, client: Client) -> VideoResponse:
        video = self.repository.create(payload.title, payload.url)
        self.logger.info(f"{client.id} created {video.id}")
        return self._convert_to_response(video)

    def update_video(self, video_id: str, payload: VideoPayload, client: Client) -> VideoResponse:
        video = self.repository.update(video_id, payload.title, payload.url)
        if video is None:
            raise VideoNotFoundError(video_id)
        self.logger.info(f"{client.id} updated {video.id}")
        return self._convert_to_response(video)

    def delete_video(self, video_id: str, client: Client) -> None:
        self.repository.delete(video_id)
        self.logger.info(f"{client.id} deleted {video_id}")

    def _convert_to_response(self, video: Video) -> VideoResponse:
        """Convert domain model to response model"""
        return VideoResponse(id=video.id, title=video.title, url=video.url)
