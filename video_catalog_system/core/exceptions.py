"""
Error taxonomy for the Video Catalog System.

Registries raise these; the API server maps each one to its HTTP status
and answers with an empty body.
"""


class VideoCatalogError(Exception):
    """Base class for all service errors"""

    status_code = 500


class MalformedInputError(VideoCatalogError):
    """Request body could not be parsed"""

    status_code = 400


class UnauthenticatedError(VideoCatalogError):
    """Missing or unresolvable bearer token"""

    status_code = 401


class UnauthorizedError(VideoCatalogError):
    """Credentials were rejected"""

    status_code = 401


class InvalidCredentialsError(UnauthorizedError):
    """No client matches the username/password pair"""


class ConflictError(VideoCatalogError):
    status_code = 409


class UsernameTakenError(ConflictError):
    """Username is already registered"""

    def __init__(self, username: str):
        super().__init__(f"Username already registered: {username}")
        self.username = username


class NotFoundError(VideoCatalogError):
    status_code = 404


class VideoNotFoundError(NotFoundError):
    """No video with the requested id"""

    def __init__(self, video_id: str):
        super().__init__(f"Video not found: {video_id}")
        self.video_id = video_id


class InternalError(VideoCatalogError):
    status_code = 500


class TokenGenerationError(InternalError):
    """Entropy source failed while issuing a session token"""
