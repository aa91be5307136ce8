"""
Summary Router Module

Serves the session summary shown in the dashboard's summary modal. When the
assistant provider fails or times out, an offline summary built from the same
statistics is returned instead.
"""

import asyncio

import structlog
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from sydney_assistant.ai import AssistantUnavailableError, BaseAssistantProvider
from sydney_assistant.engine.summary import render_offline_summary, summary_filename
from sydney_assistant.models import Trade, TradingSession

logger = structlog.get_logger(__name__)


class SummaryRequest(BaseModel):
    session: TradingSession
    trades: list[Trade] = Field(default_factory=list)


class SummaryReply(BaseModel):
    summary: str
    filename: str
    offline: bool = False


class SummaryRouter:
    """
    Router producing session summaries.

    Attributes:
        provider (BaseAssistantProvider): Backend producing the summary
        request_timeout (float): Seconds to wait for the backend
        logger (BoundLogger): Structured logger for the summary router
    """

    def __init__(
        self, provider: BaseAssistantProvider, request_timeout: float = 10.0
    ) -> None:
        self._router = APIRouter()
        self.provider = provider
        self.request_timeout = request_timeout
        self.logger = logger.bind(router="summary")
        self._setup_routes()

    def _setup_routes(self) -> None:
        @self._router.post("/", response_model=SummaryReply)
        async def summarize(request: SummaryRequest) -> SummaryReply:  # pyright: ignore [reportUnusedFunction]
            try:
                return await self.summarize(request.session, request.trades)
            except Exception as e:
                self.logger.exception("summary_failed", error=str(e))
                raise HTTPException(status_code=500, detail=str(e)) from e

    @property
    def router(self) -> APIRouter:
        """Get the FastAPI router with registered routes."""
        return self._router

    async def summarize(
        self, session: TradingSession, trades: list[Trade]
    ) -> SummaryReply:
        """
        Summarise a session, using the offline summary on transport failure.

        Args:
            session: Session to summarise
            trades: Its trades, most recent first

        Returns:
            SummaryReply: Markdown summary, download filename and offline flag
        """
        filename = summary_filename(session)
        self.logger.info("summary_requested", session=session.name, trades=len(trades))
        try:
            reply = await asyncio.wait_for(
                self.provider.generate_session_summary(session, trades),
                timeout=self.request_timeout,
            )
        except (TimeoutError, AssistantUnavailableError) as e:
            self.logger.warning(
                "summary_fallback_used", session=session.name, error=type(e).__name__
            )
            return SummaryReply(
                summary=render_offline_summary(session, trades),
                filename=filename,
                offline=True,
            )

        text = getattr(reply, "text", None)
        if not isinstance(text, str) or not text.strip():
            self.logger.warning("empty_summary_reply", session=session.name)
            return SummaryReply(
                summary=render_offline_summary(session, trades),
                filename=filename,
                offline=True,
            )
        return SummaryReply(summary=text, filename=filename)
