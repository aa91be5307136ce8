"""
AI Agent API Main Application Module

Creates the FastAPI application serving the Sydney assistant: the chat
endpoint used by the chat window and the summary endpoint used by the
session summary modal.
"""

import logging

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sydney_assistant.ai import BaseAssistantProvider, LocalAssistantProvider
from sydney_assistant.api.routes import ChatRouter, SummaryRouter
from sydney_assistant.engine.responses import ResponseGenerator
from sydney_assistant.settings import settings
from sydney_assistant.types import Thresholds

logger = structlog.get_logger(__name__)


def configure_logging(level: str) -> None:
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
        ),
    )


def create_app(provider: BaseAssistantProvider | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application instance.

    Args:
        provider: Assistant backend; defaults to LocalAssistantProvider
            configured from settings

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    configure_logging(settings.log_level)
    app = FastAPI(title="Sydney Trading Assistant", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    thresholds = Thresholds.from_yaml(settings.parameters_path)
    generator = ResponseGenerator(thresholds=thresholds)
    if provider is None:
        provider = LocalAssistantProvider(
            generator,
            thresholds,
            simulate_latency=settings.simulate_latency,
            chat_latency=(settings.chat_latency_min, settings.chat_latency_max),
            summary_latency=settings.summary_latency,
        )

    chat = ChatRouter(
        provider=provider,
        generator=generator,
        request_timeout=settings.request_timeout,
        history_window=settings.history_window,
    )
    summary = SummaryRouter(provider=provider, request_timeout=settings.request_timeout)

    app.include_router(
        chat.router, prefix=f"/api/{settings.api_version}/chat", tags=["chat"]
    )
    app.include_router(
        summary.router, prefix=f"/api/{settings.api_version}/summary", tags=["summary"]
    )
    logger.info("app_created", api_version=settings.api_version)
    return app


app = create_app()


def start() -> None:
    """
    Start the FastAPI application server.
    """
    uvicorn.run(app, host="0.0.0.0", port=8080)  # noqa: S104


if __name__ == "__main__":
    start()
