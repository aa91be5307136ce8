"""Shared fixtures for the assistant tests."""

import pytest

from sydney_assistant.models import HistoryMessage, Trade, TradingSession
from sydney_assistant.types import EntrySide


class FixedRandom:
    """Random source that always picks the same index."""

    def __init__(self, index: int = 0):
        self.index = index
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return self.index

    def uniform(self, a: float, b: float) -> float:
        return a


def make_trade(pl: float, side: str = "Long", comments: str | None = None) -> Trade:
    return Trade(profit_loss=pl, entry_side=EntrySide(side), comments=comments)


@pytest.fixture
def fixed_rng():
    return FixedRandom(0)


@pytest.fixture
def btc_session():
    return TradingSession(
        id="s-btc", name="BTC Scalping", initial_capital=100.0, current_capital=130.0
    )


@pytest.fixture
def sessions(btc_session):
    return [
        btc_session,
        TradingSession(
            id="s-eth", name="ETH Swing", initial_capital=5000.0, current_capital=4800.0
        ),
    ]


@pytest.fixture
def mixed_trades():
    """Most recent first."""
    return [
        make_trade(120.0, "Long"),
        make_trade(-40.0, "Short", "felt rushed"),
        make_trade(0.0, "Long"),
        make_trade(80.0, "Long"),
        make_trade(-60.0, "Short", "Revenge trade after stop-out"),
        make_trade(30.0, "Long"),
    ]


@pytest.fixture
def history():
    return [
        HistoryMessage(content=f"message {i}", sender="user" if i % 2 else "sydney")
        for i in range(15)
    ]
