"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    service_name: str = "ai-buddy-backend-proxy"
    allowed_origins: List[str] = ["*"]
    log_level: str = "INFO"

    # Provider keys (request headers take precedence)
    openai_api_key: str = ""
    runway_api_key: str = ""
    pika_api_key: str = ""

    # Provider endpoints
    openai_base_url: str = "https://api.openai.com/v1"
    runway_api_url: str = "https://api.runwayml.com/v1/generate/video"
    pika_api_url: str = "https://api.pika.art/v1/video"
    upstream_timeout_seconds: Optional[float] = None  # None = wait forever

    # Request defaults
    default_chat_model: str = "gpt-4o-mini"
    default_image_model: str = "gpt-image-1"
    video_duration_seconds: int = 5

    # Task registry
    task_completion_delay_ms: int = 3000
    task_ttl_seconds: int = 3600  # 0 disables
    max_tasks: int = 10000  # 0 disables

    # Mock completed-video location
    base_url: str = ""
    sample_video_url: str = "https://samplelib.com/lib/preview/mp4/sample-5s.mp4"
    static_dir: str = "static"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
