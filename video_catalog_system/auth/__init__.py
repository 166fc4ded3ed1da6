"""
Auth Module for the Video Catalog System.

Client registration, login and bearer-token resolution.
"""

from .models import Client
from .tokens import TokenGenerator
from .directory import ClientDirectory
from .gate import AuthGate
from .routes import create_auth_routes

__all__ = ["Client", "TokenGenerator", "ClientDirectory", "AuthGate", "create_auth_routes"]
