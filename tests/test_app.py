import httpx
from fastapi.testclient import TestClient

from app.jobs.registry import TaskRegistry
from app.main import create_app
from app.providers.openai import OpenAIClient
from app.services.video_submission import VideoSubmissionService

from conftest import make_settings


def test_create_app_wires_every_service():
    app = create_app(make_settings())
    assert isinstance(app.state.registry, TaskRegistry)
    assert isinstance(app.state.openai, OpenAIClient)
    assert isinstance(app.state.video_service, VideoSubmissionService)
    assert app.state.settings.service_name == "ai-buddy-backend-proxy"


def test_shutdown_closes_upstream_client():
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    app = create_app(make_settings(), http_client=http_client)
    with TestClient(app) as client:
        client.post("/api/image-to-video", json={"provider": "pika"})
        assert len(app.state.registry) == 1
    assert http_client.is_closed
