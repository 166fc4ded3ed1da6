"""
Video Repository Implementations.

In-memory implementation of the video repository interface.
"""

import logging
import threading
from dataclasses import replace
from typing import Dict, List, Optional

from ...core.exceptions import VideoNotFoundError
from ..domain.interfaces import VideoRepository
from ..domain.models import Video


class InMemoryVideoRepository(VideoRepository):
    """Process-lifetime video store guarded by a single lock"""

    def __init__(self, id_prefix: str = "video"):
        self.id_prefix = id_prefix
        self.logger = logging.getLogger(__name__)
        self._lock = threading.RLock()

        self._videos: List[Video] = []
        self._by_id: Dict[str, Video] = {}
        # Never decremented, so ids stay unique across deletions
        self._last_id = 0

    def create(self, title: str, url: str) -> Video:
        with self._lock:
            self._last_id += 1
            video = Video(id=f"{self.id_prefix}{self._last_id}", title=title, url=url)
            self._videos.append(video)
            self._by_id[video.id] = video

            self.logger.info(f"Created video {video.id}")
            return replace(video)

    def list_all(self) -> List[Video]:
        with self._lock:
            return [replace(video) for video in self._videos]

    def get_by_id(self, video_id: str) -> Optional[Video]:
        with self._lock:
            video = self._by_id.get(video_id)
            return replace(video) if video else None

    def update(self, video_id: str, title: str, url: str) -> Optional[Video]:
        with self._lock:
            video = self._by_id.get(video_id)
            if video is None:
                self.logger.debug(f"Update skipped, video not found: {video_id}")
                return None

            video.title = title
            video.url = url

            self.logger.info(f"Updated video {video_id}")
            return replace(video)

    def delete(self, video_id: str) -> None:
        with self._lock:
            video = self._by_id.pop(video_id, None)
            if video is None:
                raise VideoNotFoundError(video_id)

            self._videos.remove(video)
            self.logger.info(f"Deleted video {video_id}")

    def count(self) -> int:
        with self._lock:
            return len(self._videos)

    def __len__(self) -> int:
        return self.count()
