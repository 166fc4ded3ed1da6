import pytest
from fastapi import Depends, FastAPI, Request, Response
from fastapi.testclient import TestClient
from pydantic import BaseModel

from video_catalog_system.core.exceptions import MalformedInputError
from video_catalog_system.core.request_body import json_body


class Point(BaseModel):
    x: int = 0
    y: int = 0


@pytest.fixture
def client():
    app = FastAPI()

    @app.exception_handler(MalformedInputError)
    async def handle_malformed(request: Request, exc: MalformedInputError):
        return Response(status_code=exc.status_code, content=str(exc))

    @app.post("/points")
    def add_point(point: Point = Depends(json_body(Point))):
        return point

    return TestClient(app)


def test_parses_json_without_content_type(client):
    response = client.post("/points", content='{"x": 1, "y": 2}', headers={"Content-Type": "text/plain"})

    assert response.status_code == 200
    assert response.json() == {"x": 1, "y": 2}


def test_missing_fields_take_defaults(client):
    assert client.post("/points", content='{"x": 3}').json() == {"x": 3, "y": 0}


@pytest.mark.parametrize("body", [b"", b"{", b"[1, 2]", b'{"x": "one"}', b'{"x": "\xff"}'])
def test_malformed_body_raises_malformed_input(client, body):
    response = client.post("/points", content=body)

    assert response.status_code == 400
    assert response.text == "Malformed Point body"
