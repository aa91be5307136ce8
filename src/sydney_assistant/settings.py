from pathlib import Path

import structlog
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger(__name__)

DEFAULT_PARAMETERS_PATH = Path(__file__).parent / "config" / "parameters.yaml"


class Settings(BaseSettings):
    # Simulated model latency (seconds)
    simulate_latency: bool = True
    chat_latency_min: float = 1.0
    chat_latency_max: float = 3.0
    summary_latency: float = 1.5

    # Transport
    request_timeout: float = 10.0

    # Conversation context
    history_window: int = 10

    # CORS
    cors_origins: list[str] = ["*"]

    # API
    api_version: str = "v1"

    # Thresholds file for the response engine
    parameters_path: str = str(DEFAULT_PARAMETERS_PATH)

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="SYDNEY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
logger.debug("settings", settings=settings.model_dump())
