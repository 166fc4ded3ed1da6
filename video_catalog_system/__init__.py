"""
Video Catalog System

A small token-authenticated service for registering clients and managing
a catalog of video records over HTTP.
"""

__version__ = "1.0.0"

from .main import VideoCatalogSystem

__all__ = ["VideoCatalogSystem"]
