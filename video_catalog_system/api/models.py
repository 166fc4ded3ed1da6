"""
Data models for the Video Catalog System operational API.

This module defines Pydantic models for the unauthenticated service routes.
"""

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Generic success response model"""

    success: bool = True
    message: str


class HealthResponse(BaseModel):
    """Health check response"""

    status: str
    timestamp: str
