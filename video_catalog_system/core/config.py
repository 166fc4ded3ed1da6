"""
Configuration management for the Video Catalog System.

This module handles all configuration settings including authentication
token parameters, API server binding, and logging options.
"""

import json
import logging
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field, asdict
from pathlib import Path


@dataclass
class AuthConfig:
    """Authentication configuration"""

    token_bytes: int = 32  # Random bytes per session token (hex doubles the length)
    accept_bearer_prefix: bool = True  # Strip a leading "Bearer " from the Authorization header

    def __post_init__(self):
        if self.token_bytes < 1:
            raise ValueError(f"token_bytes must be positive, got {self.token_bytes}")


@dataclass
class SystemConfig:
    """System-wide configuration"""

    log_level: str = "INFO"
    log_file: Optional[str] = "video_catalog_system.log"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    enable_api: bool = True
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])


class Config:
    """Main configuration manager"""

    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file or "config.json"
        self.logger = logging.getLogger(__name__)

        # Default configurations
        self.auth = AuthConfig()
        self.system = SystemConfig()

        # Load configuration
        self.load_config()

    def load_config(self) -> None:
        """Load configuration from file"""
        config_path = Path(self.config_file)

        if config_path.exists():
            try:
                with open(config_path, "r") as f:
                    config_data = json.load(f)

                if "auth" in config_data:
                    self.auth = AuthConfig(**config_data["auth"])

                if "system" in config_data:
                    self.system = SystemConfig(**config_data["system"])

                self.logger.info(f"Configuration loaded from {config_path}")

            except (OSError, ValueError, TypeError) as e:
                self.logger.error(f"Error loading config from {config_path}: {e}")
                self.auth = AuthConfig()
                self.system = SystemConfig()
        else:
            self.logger.info(f"Config file {config_path} not found, using defaults")
            self.save_config()  # Save default config

    def save_config(self) -> None:
        """Save current configuration to file"""
        try:
            with open(self.config_file, "w") as f:
                json.dump(self.to_dict(), f, indent=2)
            self.logger.info(f"Configuration saved to {self.config_file}")
        except OSError as e:
            self.logger.error(f"Error saving config to {self.config_file}: {e}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {"auth": asdict(self.auth), "system": asdict(self.system)}
