"""
Shared fixtures for the Video Catalog System tests.
"""

import pytest
from fastapi.testclient import TestClient

from video_catalog_system.core.config import Config
from video_catalog_system.auth.tokens import TokenGenerator
from video_catalog_system.auth.directory import ClientDirectory
from video_catalog_system.auth.gate import AuthGate
from video_catalog_system.video.infrastructure.repositories import InMemoryVideoRepository
from video_catalog_system.video.integration import create_video_module
from video_catalog_system.api.server import APIServer

CREDENTIALS = {"username": "alice", "password": "wonderland"}


@pytest.fixture
def config(tmp_path):
    """Default configuration backed by a throwaway config file"""
    return Config(str(tmp_path / "config.json"))


@pytest.fixture
def directory():
    return ClientDirectory(TokenGenerator())


@pytest.fixture
def repository():
    return InMemoryVideoRepository()


@pytest.fixture
def api_server(config, directory, repository):
    gate = AuthGate(directory, accept_bearer_prefix=config.auth.accept_bearer_prefix)
    return APIServer(config, directory, create_video_module(gate, repository))


@pytest.fixture
def api_client(api_server):
    """In-process HTTP client for the ASGI app"""
    return TestClient(api_server.app)


@pytest.fixture
def token(api_client):
    assert api_client.post("/register", json=CREDENTIALS).status_code == 201
    response = api_client.post("/login", json=CREDENTIALS)
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": token}
