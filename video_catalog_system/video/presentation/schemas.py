"""
Video API Request/Response Schemas.

Pydantic models for API serialization and validation.
"""

from pydantic import BaseModel, ConfigDict, Field


class VideoPayload(BaseModel):
    """Body of /video/create and /video/update; an ``id`` field is ignored"""

    title: str = Field("", description="Video title")
    url: str = Field("", description="Video URL")

    model_config = ConfigDict(json_schema_extra={"example": {"title": "Launch keynote", "url": "https://example.com/keynote.mp4"}})


class VideoResponse(BaseModel):
    """Video record"""

    id: str = Field(..., description="Store-assigned identifier, e.g. video3")
    title: str
    url: str
