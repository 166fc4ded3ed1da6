"""
Auth API Request/Response Schemas.

Pydantic models for API serialization and validation.
"""

from pydantic import BaseModel, ConfigDict, Field


class CredentialsRequest(BaseModel):
    """Body of /register and /login"""

    username: str = Field("", description="Account username (case-sensitive)")
    password: str = Field("", description="Account password")

    model_config = ConfigDict(json_schema_extra={"example": {"username": "alice", "password": "s3cret"}})


class TokenResponse(BaseModel):
    """Successful login response"""

    token: str = Field(..., description="Opaque session token for the Authorization header")
