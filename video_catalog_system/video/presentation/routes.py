"""
Video API Routes.

FastAPI route definitions for video management. Every route requires a
session token; the authenticated client is injected by the auth gate.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from ...auth.gate import AuthGate
from ...auth.models import Client
from ...core.request_body import json_body
from .controllers import VideoController
from .schemas import VideoPayload, VideoResponse

video_payload_body = json_body(VideoPayload)


def create_video_routes(video_controller: VideoController, auth_gate: AuthGate) -> APIRouter:
    """Create video API routes with dependency injection"""

    router = APIRouter(tags=["videos"])

    @router.get("/videos", response_model=List[VideoResponse])
    def list_videos(client: Client = Depends(auth_gate)):
        """List all videos in store order."""
        return video_controller.list_videos(client)

    @router.get("/video", response_model=VideoResponse)
    def get_video(
        video_id: str = Query("", alias="id", description="Video identifier"),
        client: Client = Depends(auth_gate),
    ):
        """Get a single video by id."""
        return video_controller.get_video(video_id, client)

    @router.post("/video/create", response_model=VideoResponse)
    def create_video(
        client: Client = Depends(auth_gate),
        payload: VideoPayload = Depends(video_payload_body),
    ):
        """
        Create a video.

        - **title**: Video title
        - **url**: Video URL

        The id is assigned by the server.
        """
        return video_controller.create_video(payload, client)

    @router.api_route("/video/update", methods=["PUT", "POST"], response_model=VideoResponse)
    def update_video(
        video_id: str = Query("", alias="id", description="Video identifier"),
        client: Client = Depends(auth_gate),
        payload: VideoPayload = Depends(video_payload_body),
    ):
        """Replace the title and url of an existing video; the id never changes."""
        return video_controller.update_video(video_id, payload, client)

    @router.api_route("/video/delete", methods=["DELETE", "POST"], status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
    def delete_video(
        video_id: str = Query("", alias="id", description="Video identifier"),
        client: Client = Depends(auth_gate),
    ):
        """Delete a video."""
        video_controller.delete_video(video_id, client)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
