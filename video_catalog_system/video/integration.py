"""
Video Module Integration.

Wires the video store, controller and routes together.
"""

import logging
from typing import Optional

from fastapi import APIRouter

from ..auth.gate import AuthGate
from .domain.interfaces import VideoRepository
from .infrastructure.repositories import InMemoryVideoRepository
from .presentation.controllers import VideoController
from .presentation.routes import create_video_routes


class VideoModule:
    """
    Composition root for the video catalog.

    Owns the repository for the lifetime of the process and exposes the
    router the API server mounts.
    """

    def __init__(self, auth_gate: AuthGate, repository: Optional[VideoRepository] = None):
        self.auth_gate = auth_gate
        self.logger = logging.getLogger(__name__)

        self.repository = repository or InMemoryVideoRepository()
        self.controller = VideoController(self.repository)

        self.logger.info("Video module initialized successfully")

    def get_api_router(self) -> APIRouter:
        return create_video_routes(self.controller, self.auth_gate)

    def get_module_status(self) -> dict:
        return {"video_count": self.repository.count(), "repository": type(self.repository).__name__}


def create_video_module(auth_gate: AuthGate, repository: Optional[VideoRepository] = None) -> VideoModule:
    """Factory function to create a configured video module"""
    return VideoModule(auth_gate, repository)
