"""
Chat Router Module

This module implements the chat endpoint used by the journal's chat window.
It resolves explicit session-switch requests, forwards everything else to the
assistant provider, and substitutes a locally rendered reply when the provider
cannot be reached in time.

The module provides a ChatRouter class that integrates:
- Session-switch resolution through the intent router
- Replies through an assistant provider (LocalAssistantProvider by default)
- Offline replies through ResponseGenerator
"""

import asyncio

import structlog
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, field_validator

from sydney_assistant.ai import AssistantUnavailableError, BaseAssistantProvider
from sydney_assistant.engine.responses import ResponseGenerator
from sydney_assistant.greeting import WELCOME_MESSAGE, build_greeting
from sydney_assistant.models import HistoryMessage, Trade, TradingSession
from sydney_assistant.routing.intent_router import (
    classify_keywords,
    resolve_session_switch,
)

logger = structlog.get_logger(__name__)

CONNECTION_ERROR_MESSAGE = (
    "I'm sorry, I'm having trouble connecting right now. Please try again in a "
    "moment. In the meantime, I can help you switch sessions by saying something "
    "like 'Load the BTC session' or 'Switch to Apple Scalping'."
)


class ChatMessage(BaseModel):
    """
    Pydantic model for chat message validation.

    Attributes:
        message (str): The chat message content, must not be blank
        current_session (TradingSession | None): Active session, if any
        trades (list[Trade]): Trades of the active session, most recent first
        sessions (list[TradingSession]): Sessions the user can switch to
        history (list[HistoryMessage]): Prior messages, most recent last
    """

    message: str = Field(..., min_length=1)
    current_session: TradingSession | None = None
    trades: list[Trade] = Field(default_factory=list)
    sessions: list[TradingSession] = Field(default_factory=list)
    history: list[HistoryMessage] = Field(default_factory=list)

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message must not be blank")
        return value


class ChatReply(BaseModel):
    response: str
    switch_session_id: str | None = None


class ChatRouter:
    """
    Router handling chat messages.

    Attributes:
        provider (BaseAssistantProvider): Backend producing chat replies
        generator (ResponseGenerator): Local renderer used when the backend fails
        request_timeout (float): Seconds to wait for the backend
        history_window (int): Number of recent messages forwarded as context
        logger (BoundLogger): Structured logger for the chat router
    """

    def __init__(
        self,
        provider: BaseAssistantProvider,
        generator: ResponseGenerator,
        request_timeout: float = 10.0,
        history_window: int = 10,
    ) -> None:
        """
        Initialize the ChatRouter with its collaborators.

        Args:
            provider: Backend producing chat replies
            generator: Local renderer for the offline path
            request_timeout: Seconds to wait for the backend
            history_window: Number of recent messages forwarded as context
        """
        self._router = APIRouter()
        self.provider = provider
        self.generator = generator
        self.request_timeout = request_timeout
        self.history_window = history_window
        self.logger = logger.bind(router="chat")
        self._setup_routes()

    def _setup_routes(self) -> None:
        """
        Set up FastAPI routes for the chat endpoint.
        """

        @self._router.post("/", response_model=ChatReply)
        async def chat(message: ChatMessage) -> ChatReply:  # pyright: ignore [reportUnusedFunction]
            """
            Process an incoming chat message.

            Raises:
                HTTPException: If message handling fails unexpectedly
            """
            try:
                return await self.handle_message(message)
            except Exception as e:
                self.logger.exception("message_handling_failed", error=str(e))
                raise HTTPException(status_code=500, detail=str(e)) from e

        @self._router.get("/welcome")
        async def welcome() -> dict[str, str]:  # pyright: ignore [reportUnusedFunction]
            return {"response": WELCOME_MESSAGE}

        @self._router.get("/greeting")
        async def greeting(email: str) -> dict[str, str]:  # pyright: ignore [reportUnusedFunction]
            return {"greeting": build_greeting(email)}

    @property
    def router(self) -> APIRouter:
        """Get the FastAPI router with registered routes."""
        return self._router

    async def handle_message(self, message: ChatMessage) -> ChatReply:
        """
        Switch sessions when asked to explicitly, otherwise ask the provider.

        Args:
            message: Validated chat message

        Returns:
            ChatReply: Reply text, plus the session id to activate on a switch
        """
        self.logger.debug("received_message", message=message.message)

        switch = resolve_session_switch(message.message, message.sessions)
        if switch is not None:
            self.logger.info(
                "session_switched",
                session_id=switch.session.id,
                session=switch.session.name,
            )
            return ChatReply(
                response=switch.response, switch_session_id=switch.session.id
            )

        return ChatReply(response=await self.get_response(message))

    async def get_response(self, message: ChatMessage) -> str:
        """
        Ask the provider for a reply, falling back to a local render once.

        Args:
            message: Validated chat message

        Returns:
            str: Provider reply, or the offline reply on timeout/unavailability
        """
        history = message.history[-self.history_window :]
        try:
            reply = await asyncio.wait_for(
                self.provider.send_chat_message(
                    message.message,
                    message.current_session,
                    message.trades,
                    history,
                ),
                timeout=self.request_timeout,
            )
        except (TimeoutError, AssistantUnavailableError) as e:
            self.logger.warning(
                "assistant_unavailable", error=type(e).__name__, fallback="offline"
            )
            return self.offline_response(message, history)

        text = getattr(reply, "text", None)
        if not isinstance(text, str) or not text.strip():
            self.logger.warning("empty_assistant_reply")
            return self.offline_response(message, history)
        return text

    def offline_response(
        self, message: ChatMessage, history: list[HistoryMessage]
    ) -> str:
        try:
            intent = classify_keywords(message.message)
            return self.generator.respond(
                intent,
                message.message,
                message.current_session,
                message.trades,
                history,
            )
        except Exception as e:
            self.logger.exception("offline_response_failed", error=str(e))
            return CONNECTION_ERROR_MESSAGE
