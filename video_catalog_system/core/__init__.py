"""
Video Catalog System - Core Module

This module contains configuration management, logging setup and the
error types shared by the auth and video components.
"""

__version__ = "1.0.0"

from .config import Config, AuthConfig, SystemConfig
from .exceptions import VideoCatalogError

__all__ = ["Config", "AuthConfig", "SystemConfig", "VideoCatalogError"]
