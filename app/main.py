"""AI Buddy backend proxy - FastAPI application."""

import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.config import Settings, settings as default_settings
from app.api.router import api_router
from app.jobs.completion import FixedDelayCompletion
from app.jobs.registry import InMemoryTaskRegistry
from app.providers import build_openai_client, build_video_providers
from app.services.video_submission import VideoSubmissionService

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
    clock: Optional[Callable[[], int]] = None,
) -> FastAPI:
    """Build the application with its own task registry and upstream client.

    `http_client` and `clock` exist so tests can fake the network and time.
    """
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level.upper())

    client = http_client or httpx.AsyncClient(timeout=settings.upstream_timeout_seconds)

    completion = FixedDelayCompletion(
        delay_ms=settings.task_completion_delay_ms,
        base_url=settings.base_url,
        fallback_url=settings.sample_video_url,
    )
    registry_kwargs = {}
    if clock is not None:
        registry_kwargs["clock"] = clock
    registry = InMemoryTaskRegistry(
        completion,
        ttl_seconds=settings.task_ttl_seconds,
        max_tasks=settings.max_tasks,
        **registry_kwargs,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown logic."""
        logger.info("Starting %s on port %s", settings.service_name, settings.port)
        logger.info("OpenAI key configured: %s", bool(settings.openai_api_key))
        logger.info("Runway key configured: %s", bool(settings.runway_api_key))
        logger.info("Pika key configured: %s", bool(settings.pika_api_key))
        logger.info("Static dir: %s", settings.static_dir)

        yield

        logger.info("Shutting down %s", settings.service_name)
        await client.aclose()

    app = FastAPI(
        title="AI Buddy Backend Proxy",
        description="Credential-injecting proxy for chat, image and image-to-video providers",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Services are owned by the app instance; routers reach them via app.state
    app.state.settings = settings
    app.state.registry = registry
    app.state.openai = build_openai_client(settings, client)
    app.state.video_service = VideoSubmissionService(
        registry, build_video_providers(settings, client)
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    app.mount("/static", StaticFiles(directory=settings.static_dir, check_dir=False), name="static")

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=default_settings.host, port=default_settings.port)


if __name__ == "__main__":
    run()
