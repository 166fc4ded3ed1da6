"""
FastAPI Server for the Video Catalog System.

This module assembles the REST API: auth routes, token-gated video routes,
and the mapping from service errors to empty-bodied HTTP responses.
"""

import logging
import threading
from typing import Dict, Optional, Any
from datetime import datetime

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from ..core.config import Config
from ..core.exceptions import VideoCatalogError
from ..core.logging_config import ErrorTracker
from ..auth.directory import ClientDirectory
from ..auth.routes import create_auth_routes
from ..video.integration import VideoModule
from .models import HealthResponse, SuccessResponse


class APIServer:
    """FastAPI server for the Video Catalog System"""

    def __init__(self, config: Config, client_directory: ClientDirectory, video_module: VideoModule):
        self.config = config
        self.client_directory = client_directory
        self.video_module = video_module
        self.logger = logging.getLogger(__name__)
        self.error_tracker = ErrorTracker("api")

        self.app = FastAPI(title="Video Catalog System API", description="Token-authenticated CRUD API for video records", version="1.0.0")

        # Server state
        self.server_start_time = datetime.now()
        self.running = False
        self._server: Optional[uvicorn.Server] = None
        self._server_thread: Optional[threading.Thread] = None

        self.app.add_middleware(CORSMiddleware, allow_origins=self.config.system.cors_allow_origins, allow_credentials=True, allow_methods=["*"], allow_headers=["*"])

        self._setup_exception_handlers()
        self._setup_routes()

    def _setup_routes(self):
        """Setup API routes"""

        @self.app.get("/", response_model=SuccessResponse)
        async def root():
            return SuccessResponse(message="Video Catalog System API")

        @self.app.get("/health", response_model=HealthResponse)
        async def health_check():
            return HealthResponse(status="healthy", timestamp=datetime.now().isoformat())

        self.app.include_router(create_auth_routes(self.client_directory))
        self.app.include_router(self.video_module.get_api_router())

    def _setup_exception_handlers(self):
        """Map service errors to status-only responses"""

        @self.app.exception_handler(VideoCatalogError)
        async def handle_service_error(request: Request, exc: VideoCatalogError):
            if exc.status_code >= 500:
                self.error_tracker.log_error(exc, f"{request.method} {request.url.path}")
            else:
                self.logger.info(f"{request.method} {request.url.path} -> {exc.status_code} ({type(exc).__name__})")
            return Response(status_code=exc.status_code)

        @self.app.exception_handler(RequestValidationError)
        async def handle_malformed_body(request: Request, exc: RequestValidationError):
            self.logger.info(f"{request.method} {request.url.path} -> 400 (malformed input: {len(exc.errors())} errors)")
            return Response(status_code=400)

        @self.app.exception_handler(StarletteHTTPException)
        async def handle_http_error(request: Request, exc: StarletteHTTPException):
            # Routing and body-parsing failures (404, 405, 400) lose their detail too
            self.logger.info(f"{request.method} {request.url.path} -> {exc.status_code}")
            return Response(status_code=exc.status_code, headers=exc.headers)

    def start(self) -> bool:
        """Start the API server"""
        if self.running:
            self.logger.warning("API server is already running")
            return True

        if not self.config.system.enable_api:
            self.logger.info("API server disabled in configuration")
            return False

        try:
            self.logger.info(f"Starting API server on {self.config.system.api_host}:{self.config.system.api_port}")

            uvicorn_config = uvicorn.Config(self.app, host=self.config.system.api_host, port=self.config.system.api_port, log_level="info")
            self._server = uvicorn.Server(uvicorn_config)
            self.running = True

            # Start server in separate thread
            self._server_thread = threading.Thread(target=self._run_server, daemon=True)
            self._server_thread.start()

            return True

        except (OSError, RuntimeError) as e:
            self.logger.error(f"Error starting API server: {e}")
            self.running = False
            return False

    def stop(self) -> None:
        """Stop the API server"""
        if not self.running:
            return

        self.logger.info("Stopping API server...")
        self.running = False

        if self._server is not None:
            self._server.should_exit = True
        if self._server_thread is not None:
            self._server_thread.join(timeout=5)

        self.logger.info("API server stopped")

    def _run_server(self) -> None:
        """Run the uvicorn server"""
        try:
            self._server.run()
        except Exception as e:
            self.logger.error(f"Error running API server: {e}")
        finally:
            self.running = False

    def is_running(self) -> bool:
        """Check if API server is running"""
        return self.running

    def get_server_info(self) -> Dict[str, Any]:
        """Get server information"""
        return {
            "running": self.running,
            "host": self.config.system.api_host,
            "port": self.config.system.api_port,
            "start_time": self.server_start_time.isoformat(),
            "uptime_seconds": (datetime.now() - self.server_start_time).total_seconds(),
            "client_count": self.client_directory.count(),
            **self.video_module.get_module_status(),
            "errors": self.error_tracker.get_error_stats(),
        }
