"""
Auth API Routes.

Registration and login; neither goes through the authentication gate.
"""

from fastapi import APIRouter, Depends, Response, status

from ..core.request_body import json_body
from .directory import ClientDirectory
from .schemas import CredentialsRequest, TokenResponse

credentials_body = json_body(CredentialsRequest)


def create_auth_routes(directory: ClientDirectory) -> APIRouter:
    """Create registration/login routes bound to a client directory"""

    router = APIRouter(tags=["auth"])

    @router.post("/register", status_code=status.HTTP_201_CREATED, response_class=Response)
    def register(credentials: CredentialsRequest = Depends(credentials_body)):
        """
        Register a new client.

        Returns 201 with an empty body, or 409 if the username is taken.
        """
        directory.register(credentials.username, credentials.password)
        return Response(status_code=status.HTTP_201_CREATED)

    @router.post("/login", response_model=TokenResponse)
    def login(credentials: CredentialsRequest = Depends(credentials_body)):
        """
        Log in and receive a session token.

        Logging in again replaces the previous token.
        """
        token = directory.login(credentials.username, credentials.password)
        return TokenResponse(token=token)

    return router
