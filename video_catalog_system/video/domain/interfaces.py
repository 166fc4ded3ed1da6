"""
Video Domain Interfaces.

Abstract interfaces that define contracts for video storage.
The presentation layer depends on these, not on a concrete store.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .models import Video


class VideoRepository(ABC):
    """Abstract repository for video records.

    Implementations must be safe to call from concurrent request threads
    and must never reuse an id, even after deletions.
    """

    @abstractmethod
    def create(self, title: str, url: str) -> Video:
        """Store a new video and return it with its assigned id"""
        pass

    @abstractmethod
    def list_all(self) -> List[Video]:
        """All videos in store order"""
        pass

    @abstractmethod
    def get_by_id(self, video_id: str) -> Optional[Video]:
        pass

    @abstractmethod
    def update(self, video_id: str, title: str, url: str) -> Optional[Video]:
        """Replace title and url; None if the id is unknown"""
        pass

    @abstractmethod
    def delete(self, video_id: str) -> None:
        """Remove a video; raises VideoNotFoundError if the id is unknown"""
        pass

    @abstractmethod
    def count(self) -> int:
        pass
