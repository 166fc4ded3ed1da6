"""
API module for the Video Catalog System.

This module provides the REST API endpoints.
"""

from .server import APIServer

__all__ = ["APIServer"]
