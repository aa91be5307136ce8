from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from sydney_assistant.models import HistoryMessage, Trade, TradingSession


class AssistantUnavailableError(Exception):
    """Raised when the assistant backend cannot be reached."""


@dataclass
class ModelResponse:
    """
    Reply from an assistant provider.

    Attributes:
        text: Rendered reply
        metadata: Provider-specific details (intent, simulated delay, ...)
    """
    text: str
    metadata: dict[str, Any] = field(default_factory=dict)


class BaseAssistantProvider(ABC):
    """Interface every assistant backend implements."""

    @abstractmethod
    async def send_chat_message(
        self,
        message: str,
        session: TradingSession | None,
        trades: Sequence[Trade],
        history: Sequence[HistoryMessage],
    ) -> ModelResponse:
        """Answer one chat message."""

    @abstractmethod
    async def generate_session_summary(
        self, session: TradingSession, trades: Sequence[Trade]
    ) -> ModelResponse:
        """Produce the markdown summary for a session."""
