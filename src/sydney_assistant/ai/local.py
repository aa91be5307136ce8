"""
Local Assistant Provider

Stands in for a remote language model: replies come from the deterministic
router and templates, after an artificial network delay. The delay is an
injected awaitable so tests can run without waiting.
"""
import asyncio
import random
from collections.abc import Awaitable, Callable, Sequence
from typing_extensions import override

import structlog

from sydney_assistant.ai.base import BaseAssistantProvider, ModelResponse
from sydney_assistant.engine.responses import ResponseGenerator
from sydney_assistant.engine.summary import render_summary
from sydney_assistant.models import HistoryMessage, Trade, TradingSession
from sydney_assistant.routing.intent_router import classify_keywords
from sydney_assistant.types import Thresholds

logger = structlog.get_logger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class LocalAssistantProvider(BaseAssistantProvider):
    """
    Rule-based provider with simulated latency.

    Attributes:
        generator (ResponseGenerator): Renders chat replies
        thresholds (Thresholds): Cut-offs shared with the summary renderer
        simulate_latency (bool): When False, replies are returned immediately
        chat_latency (tuple[float, float]): Uniform delay range for chat, seconds
        summary_latency (float): Fixed delay for summaries, seconds
    """

    def __init__(
        self,
        generator: ResponseGenerator | None = None,
        thresholds: Thresholds | None = None,
        *,
        simulate_latency: bool = True,
        chat_latency: tuple[float, float] = (1.0, 3.0),
        summary_latency: float = 1.5,
        sleep: Sleep = asyncio.sleep,
        rng: random.Random | None = None,
    ) -> None:
        self.thresholds = thresholds or Thresholds()
        self.generator = generator or ResponseGenerator(thresholds=self.thresholds)
        self.simulate_latency = simulate_latency
        self.chat_latency = chat_latency
        self.summary_latency = summary_latency
        self._sleep = sleep
        self._rng = rng or random.Random()
        self.logger = logger.bind(service="local_assistant")

    async def _delay(self, seconds: float) -> float:
        if not self.simulate_latency or seconds <= 0:
            return 0.0
        await self._sleep(seconds)
        return seconds

    @override
    async def send_chat_message(
        self,
        message: str,
        session: TradingSession | None,
        trades: Sequence[Trade],
        history: Sequence[HistoryMessage],
    ) -> ModelResponse:
        low, high = self.chat_latency
        delay = await self._delay(self._rng.uniform(low, high))

        intent = classify_keywords(message)
        text = self.generator.respond(intent, message, session, trades, history)
        self.logger.debug("chat_reply_ready", intent=intent.value, delay=delay)
        return ModelResponse(
            text=text,
            metadata={"intent": intent.value, "delay": delay, "simulated": True},
        )

    @override
    async def generate_session_summary(
        self, session: TradingSession, trades: Sequence[Trade]
    ) -> ModelResponse:
        delay = await self._delay(self.summary_latency)

        text = render_summary(session, trades, self.thresholds.summary)
        self.logger.debug(
            "summary_ready", session=session.name, trades=len(trades), delay=delay
        )
        return ModelResponse(
            text=text, metadata={"delay": delay, "simulated": True}
        )
