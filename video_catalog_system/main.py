"""
Main Application Coordinator for the Video Catalog System.

This module wires configuration, logging, the registries and the API server
together and provides graceful startup/shutdown.
"""

import signal
import time
import logging
import sys
from typing import List, Optional
from datetime import datetime

from .core.config import Config
from .core.logging_config import setup_logging, ErrorTracker
from .auth.tokens import TokenGenerator
from .auth.directory import ClientDirectory
from .auth.gate import AuthGate
from .video.integration import create_video_module
from .api.server import APIServer


class VideoCatalogSystem:
    """Main application coordinator for the Video Catalog System"""

    def __init__(self, config_file: Optional[str] = None, config: Optional[Config] = None):
        # Load configuration first (basic logging will be used initially)
        self.config = config or Config(config_file)

        setup_logging(log_level=self.config.system.log_level, log_file=self.config.system.log_file)
        self.logger = logging.getLogger(__name__)

        self.error_tracker = ErrorTracker("main_system")

        # Process-lifetime registries
        self.client_directory = ClientDirectory(TokenGenerator(self.config.auth.token_bytes))
        self.auth_gate = AuthGate(self.client_directory, accept_bearer_prefix=self.config.auth.accept_bearer_prefix)
        self.video_module = create_video_module(self.auth_gate)
        self.api_server = APIServer(self.config, self.client_directory, self.video_module)

        self.running = False
        self.start_time: Optional[datetime] = None

        self.logger.info("Video Catalog System initialized")

    def _setup_signal_handlers(self) -> None:
        """Setup signal handlers for graceful shutdown"""

        def signal_handler(signum, frame):
            self.logger.info(f"Received signal {signum}, initiating graceful shutdown...")
            self.stop()

        signal.signal(signal.SIGINT, signal_handler)
        signal.signal(signal.SIGTERM, signal_handler)

    def start(self) -> bool:
        """Start the system"""
        if self.running:
            self.logger.warning("System is already running")
            return True

        self.logger.info("Starting Video Catalog System...")
        started = time.monotonic()
        self.start_time = datetime.now()

        if not self.api_server.start():
            self.error_tracker.log_warning("Failed to start API server", "api_startup")
            return False

        self.running = True
        startup_time = time.monotonic() - started
        self.logger.info(f"Video Catalog System started successfully in {startup_time:.2f}s")
        return True

    def stop(self) -> None:
        """Stop the system gracefully"""
        if not self.running:
            return

        self.logger.info("Stopping Video Catalog System...")
        self.running = False

        self.api_server.stop()

        if self.start_time:
            uptime = (datetime.now() - self.start_time).total_seconds()
            self.logger.info(f"System uptime: {uptime:.1f} seconds")

        self.logger.info("Video Catalog System stopped")

    def run(self) -> None:
        """Run the system (blocking call)"""
        self._setup_signal_handlers()

        if not self.start():
            self.logger.error("Failed to start system")
            return

        try:
            self.logger.info("System running... Press Ctrl+C to stop")

            # Keep alive while the server thread serves requests
            while self.running and self.api_server.is_running():
                time.sleep(1)

        except KeyboardInterrupt:
            self.logger.info("Keyboard interrupt received")
        finally:
            self.stop()

    def get_system_status(self) -> dict:
        """Get system status"""
        return {
            "running": self.running,
            "start_time": self.start_time.isoformat() if self.start_time else None,
            "uptime_seconds": (datetime.now() - self.start_time).total_seconds() if self.start_time else 0,
            "api_server": self.api_server.get_server_info(),
        }

    def is_running(self) -> bool:
        """Check if system is running"""
        return self.running


def load_config_from_args(argv: Optional[List[str]] = None) -> Config:
    """Parse command-line arguments and apply their overrides to the config file"""
    import argparse

    parser = argparse.ArgumentParser(description="Video Catalog System")
    parser.add_argument("--config", type=str, help="Path to configuration file", default="config.json")
    parser.add_argument("--log-level", type=str, choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Override log level", default=None)
    parser.add_argument("--host", type=str, help="Override API host", default=None)
    parser.add_argument("--port", type=int, help="Override API port (0 picks a free port)", default=None)

    args = parser.parse_args(argv)

    config = Config(args.config)
    if args.log_level is not None:
        config.system.log_level = args.log_level
    if args.host is not None:
        config.system.api_host = args.host
    if args.port is not None:
        config.system.api_port = args.port
    return config


def main():
    """Main entry point for the application"""
    system = VideoCatalogSystem(config=load_config_from_args())

    try:
        system.run()
    except Exception as e:
        logging.getLogger(__name__).critical(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
